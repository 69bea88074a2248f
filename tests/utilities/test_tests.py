import pytest

import openapi_filter
from openapi_filter.utilities.tests import temporary_settings


class TestTemporarySettings:
    def test_temporary_settings(self):
        with temporary_settings(max_listed_paths=3):
            assert openapi_filter.settings.settings.max_listed_paths == 3
        assert openapi_filter.settings.settings.max_listed_paths == 10

    def test_unknown_setting(self):
        with pytest.raises(AttributeError, match="not_a_setting"):
            with temporary_settings(not_a_setting=1):
                pass
