"""Settings for vc-testkit"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from gbpcli.settings import BaseSettings


@dataclass(kw_only=True, frozen=True, slots=True)
class Settings(BaseSettings):
    """vc-testkit Settings"""

    # pylint: disable=invalid-name
    env_prefix: ClassVar = "VC_TESTKIT_"

    DATABASE: str = "default"
    REQUIRE_TEST_DATABASE: bool = True
    REQUEST_PATH: str = "/"
    GENERATE_TESTS: bool = True
