import io
from datetime import datetime

import pytest

from pockets.pocketlog import Level, Logger, add_date, add_prefix_based_on_level

DEBUG_MESSAGE = "Why write I still all one, ever the same,"
INFO_MESSAGE = "And keep invention in a noted weed,"
ERROR_MESSAGE = "That every word doth almost tell my name,"


def test_debugf_example_writes_to_stdout_by_default(capsys):
    logger = Logger(Level.DEBUG, None)
    logger.debugf("Hello, %s", "world")
    assert capsys.readouterr().out == "Hello, world\n"


@pytest.mark.parametrize(
    "level, expected",
    [
        (Level.DEBUG, DEBUG_MESSAGE + "\n" + INFO_MESSAGE + "\n" + ERROR_MESSAGE + "\n"),
        (Level.INFO, INFO_MESSAGE + "\n" + ERROR_MESSAGE + "\n"),
        (Level.ERROR, ERROR_MESSAGE + "\n"),
    ],
)
def test_debugf_infof_errorf(level, expected):
    out = io.StringIO()
    logger = Logger(level, output=out)
    logger.debugf(DEBUG_MESSAGE)
    logger.infof(INFO_MESSAGE)
    logger.errorf(ERROR_MESSAGE)
    assert out.getvalue() == expected


def test_percent_without_args_is_written_verbatim():
    out = io.StringIO()
    Logger(Level.DEBUG, output=out).infof("100%")
    assert out.getvalue() == "100%\n"


def test_logf_formats_arguments():
    out = io.StringIO()
    Logger(Level.DEBUG, output=out).logf(Level.INFO, "Make the zero (%d) value useful.", 0)
    assert out.getvalue() == "Make the zero (0) value useful.\n"


@pytest.mark.parametrize(
    "level, label",
    [(Level.DEBUG, "DEBUG"), (Level.INFO, "INFO"), (Level.ERROR, "ERROR")],
)
def test_prefix_option(level, label):
    out = io.StringIO()
    logger = Logger(Level.DEBUG, output=out, message_options=[add_prefix_based_on_level()])
    logger.logf(level, "message %s", "here")
    assert out.getvalue() == f"[{label}] message here\n"


def test_prefix_option_leaves_unknown_level_untouched():
    option = add_prefix_based_on_level()
    assert option("plain", 7) == "plain"


def test_threshold_filters_lower_levels_through_logf():
    out = io.StringIO()
    logger = Logger(Level.INFO, output=out)
    logger.logf(Level.DEBUG, "hidden")
    logger.logf(Level.INFO, "shown")
    logger.logf(Level.ERROR, "also shown")
    assert out.getvalue() == "shown\nalso shown\n"


def test_date_option_prefixes_parseable_timestamp():
    option = add_date()
    result = option("hello", Level.INFO)
    stamp, sep, rest = result.partition("| ")
    assert sep == "| "
    assert rest == "hello"
    parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
    assert parsed.tzinfo is not None
    assert abs((datetime.now().astimezone() - parsed).total_seconds()) < 60


def test_options_applied_in_order():
    out = io.StringIO()
    logger = Logger(
        Level.DEBUG,
        output=out,
        message_options=[add_prefix_based_on_level(), add_date()],
    )
    logger.errorf("boom")
    line = out.getvalue()
    assert line.endswith("| [ERROR] boom\n")


def test_none_options_are_ignored():
    out = io.StringIO()
    logger = Logger(Level.DEBUG, output=out, message_options=[None, add_prefix_based_on_level()])
    logger.debugf("x")
    assert out.getvalue() == "[DEBUG] x\n"


def test_filtered_messages_produce_no_output():
    out = io.StringIO()
    logger = Logger(Level.ERROR, output=out, message_options=[add_prefix_based_on_level()])
    logger.debugf(DEBUG_MESSAGE)
    logger.infof(INFO_MESSAGE)
    assert out.getvalue() == ""