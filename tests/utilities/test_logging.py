import logging

from openapi_filter.utilities.logging import configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("closure").name == "OpenAPIFilter.closure"


def test_logging_doesnt_affect_other_loggers(caplog):
    # set OpenAPIFilter loggers to CRITICAL and ensure other loggers still emit messages
    original_level = logging.getLogger("OpenAPIFilter").getEffectiveLevel()

    try:
        logging.getLogger("OpenAPIFilter").setLevel(logging.CRITICAL)

        root_logger = logging.getLogger()
        app_logger = logging.getLogger("app")
        filter_logger = logging.getLogger("OpenAPIFilter")
        selector_logger = get_logger("selector")

        with caplog.at_level(logging.INFO):
            root_logger.info("--ROOT--")
            app_logger.info("--APP--")
            filter_logger.info("--FILTER--")
            selector_logger.info("--FILTER SELECTOR--")

        assert "--ROOT--" in caplog.text
        assert "--APP--" in caplog.text
        assert "--FILTER--" not in caplog.text
        assert "--FILTER SELECTOR--" not in caplog.text

    finally:
        logging.getLogger("OpenAPIFilter").setLevel(original_level)


def test_configure_logging_sets_namespace_level():
    original_level = logging.getLogger("OpenAPIFilter").level

    try:
        configure_logging("DEBUG")
        assert get_logger("closure").isEnabledFor(logging.DEBUG)
    finally:
        logging.getLogger("OpenAPIFilter").setLevel(original_level)
