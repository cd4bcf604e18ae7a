#!filepath: iter_cursor/config/observability_config.py
from pydantic import BaseModel


class ObservabilityConfig(BaseModel):
    enabled: bool = False
