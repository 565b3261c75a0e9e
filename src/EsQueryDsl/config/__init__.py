"""Public configuration API for EsQueryDsl."""

from __future__ import annotations

from EsQueryDsl.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from EsQueryDsl.config.output import OutputConfig
from EsQueryDsl.config.query import QueryConfig, parse_query_doc, parse_query_item
from EsQueryDsl.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "OutputConfig",
    "QueryConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_query_doc",
    "parse_query_item",
]
