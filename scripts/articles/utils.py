from typing import Any, Mapping, TypeVar, TypedDict

D = TypeVar("D", bound=TypedDict("D", {}))


def resolve_config(config: Mapping[str, Any], default_config: D) -> D:
    """Return a copy of ``default_config`` with the keys it declares taken from ``config``.

    Keys ``default_config`` does not declare are dropped, so a component never
    sees settings meant for another one.
    """
    resolved = default_config.copy()
    resolved.update((key, config[key]) for key in default_config if key in config)
    return resolved
