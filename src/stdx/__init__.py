"""
stdx
====

Does: Root package for Ruby/Rack/Rails-flavoured helpers.
Returns: Exposes the `stringx`, `net`, `timex` and `utils` subpackages.
Used by: All imports starting from `stdx.*`.
"""

__all__: list[str] = ["stringx", "net", "timex", "utils"]
__version__ = "0.1.0"
__docformat__ = "google"
