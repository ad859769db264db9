from typing import TypedDict


class AlgorithmParams(TypedDict):
    fallback_to_majority: bool
    enable_logging: bool


DEFAULT_PARAMS_VALUES: AlgorithmParams = AlgorithmParams(
    fallback_to_majority=False,
    enable_logging=False,
)


def resolve_params(params: dict) -> AlgorithmParams:
    """Fills missing parameters with defaults and rejects unknown ones."""
    unknown: set[str] = set(params).difference(DEFAULT_PARAMS_VALUES)
    if unknown:
        raise ValueError(f"Unknown algorithm parameters: {sorted(unknown)}")
    resolved: AlgorithmParams = DEFAULT_PARAMS_VALUES.copy()
    resolved.update(params)
    return resolved
