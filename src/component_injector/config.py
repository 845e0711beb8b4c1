import os
from dataclasses import dataclass, field

DUPLICATE_POLICIES = ("replace", "warn", "error")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class InjectorConfig:
    """Settings for building a handler index.

    Defaults are read from the environment each time a config is created.

    duplicates: what to do when two handlers accept the same type
        ('replace' | 'warn' | 'error'). 'replace' and 'warn' keep the one
        encountered last. Env: COMPONENT_INJECTOR_DUPLICATES.
    include_private: also index single-underscore methods. Dunder methods are
        never indexed. Env: COMPONENT_INJECTOR_INCLUDE_PRIVATE.
    """

    duplicates: str = field(
        default_factory=lambda: os.getenv("COMPONENT_INJECTOR_DUPLICATES", "replace").lower()
    )
    include_private: bool = field(
        default_factory=lambda: _env_flag("COMPONENT_INJECTOR_INCLUDE_PRIVATE")
    )

    def __post_init__(self):
        if self.duplicates not in DUPLICATE_POLICIES:
            raise ValueError(
                f"Unknown duplicate policy {self.duplicates!r}, expected one of {DUPLICATE_POLICIES}"
            )
