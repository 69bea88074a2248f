import copy
from contextlib import contextmanager
from typing import Any

from openapi_filter.settings import settings


@contextmanager
def temporary_settings(**kwargs: Any):
    """
    Temporarily override openapi-filter setting values.

    Args:
        **kwargs: The settings to override.

    Example:
        Temporarily override a setting:
        ```python
        import openapi_filter
        from openapi_filter.utilities.tests import temporary_settings

        with temporary_settings(max_listed_paths=3):
            assert openapi_filter.settings.settings.max_listed_paths == 3
        assert openapi_filter.settings.settings.max_listed_paths == 10
        ```
    """
    old_settings = copy.deepcopy(settings.model_dump())

    try:
        # apply the new settings
        for attr, value in kwargs.items():
            if not hasattr(settings, attr):
                raise AttributeError(f"Setting {attr} does not exist.")
            setattr(settings, attr, value)
        yield

    finally:
        # restore the old settings
        for attr in kwargs:
            if hasattr(settings, attr):
                setattr(settings, attr, old_settings[attr])
