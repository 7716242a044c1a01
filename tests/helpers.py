from entcheck.features.result_structs import Undefined


def pi_group(x: int, y: int) -> bytes:
    """Build one Monte Carlo group from two 24-bit coordinates."""
    return x.to_bytes(3, "big") + y.to_bytes(3, "big")

def assert_undefined(value, reason: str):
    assert isinstance(value, Undefined), f"Expected an undefined result, got {value!r}"
    assert value.reason == reason

def terse_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line]
