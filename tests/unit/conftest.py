from unittest.mock import MagicMock

import pytest

from hotel_reservation.hotel.domain.entity import Guest, HotelChain


@pytest.fixture
def guest():
    """全テスト共通の Guest フィクスチャ"""
    return Guest.create("Ali", "Lahore")


@pytest.fixture
def chain():
    """空の HotelChain フィクスチャ"""
    return HotelChain()


@pytest.fixture
def mock_chain():
    """HotelChain のモックフィクスチャ"""
    return MagicMock()
