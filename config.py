"""
Constants and configuration for the Dependency Analyzer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Tuple

from pydantic_settings import BaseSettings


DEPENDENCY_EVENT_KIND = "dependency"

DEPANALYZER_API_HOST = os.getenv("DEPANALYZER_API_HOST", "0.0.0.0")
DEPANALYZER_API_PORT = int(os.getenv("DEPANALYZER_API_PORT", "4323"))
DEPANALYZER_API_PREFIX = os.getenv("DEPANALYZER_API_PREFIX", "/api/v1").rstrip("/")
DEPANALYZER_LOG_LEVEL = os.getenv("DEPANALYZER_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# sample topology used by the demo and the shell's "demo" command;
# F -> C closes the cycle C -> E -> F -> C
SAMPLE_DEPENDENCIES: List[Tuple[str, str, int]] = [
    ("A", "B", 5),
    ("A", "C", 3),
    ("B", "D", 2),
    ("C", "D", 7),
    ("C", "E", 4),
    ("D", "F", 6),
    ("E", "F", 1),
    ("F", "C", 8),
    ("F", "G", 10),
    ("G", "H", 9),
]

DEMO_PROBE_SERVICES: List[str] = ["A", "F", "B", "G", "E"]


class Settings(BaseSettings):
    api_host: str = DEPANALYZER_API_HOST
    api_port: int = DEPANALYZER_API_PORT
    api_prefix: str = DEPANALYZER_API_PREFIX

    log_level: str = DEPANALYZER_LOG_LEVEL
    log_format: str = LOG_FORMAT

    # services whose reachable sets the demo prints
    demo_probe_services: List[str] = DEMO_PROBE_SERVICES

    model_config = {
        "env_prefix": "DEPANALYZER_",
        "extra": "ignore",
    }


settings = Settings()
