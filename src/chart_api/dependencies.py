from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, HTTPException

from directory_connector import DirectoryConnectionError, DirectoryConnector
from org_chart.config import settings
from tree_builder import BuildConfig


def get_directory() -> Generator[DirectoryConnector, None, None]:
    """FastAPI dependency that opens and closes a DirectoryConnector per request."""
    connector = settings.create_connector()
    try:
        connector.connect()
    except DirectoryConnectionError as exc:
        raise HTTPException(status_code=503, detail=f"Directory unavailable: {exc}") from exc
    try:
        yield connector
    finally:
        connector.disconnect()


def get_build_config() -> BuildConfig:
    return settings.build_config()


Directory = Annotated[DirectoryConnector, Depends(get_directory)]
Config = Annotated[BuildConfig, Depends(get_build_config)]
