import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "hotel-reservation"


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名付きの Logger を返す

    サービス名を省略した場合は POWERTOOLS_SERVICE_NAME を参照する。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
