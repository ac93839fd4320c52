"""Testing utilities for torchmoments operators.

Example usage:

    import hypothesis
    from torchmoments.testing.strategies import samples

    @hypothesis.given(x=samples())
    def test_first_central_moment_is_zero(x):
        ...
"""

from . import strategies

__all__ = ["strategies"]
