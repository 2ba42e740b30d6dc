import pytest

from bvgraph.logs import (
    DEFAULT_LOGGER_FILE,
    DEFAULT_LOGGER_NAME,
    LogLevel,
    ModuleLogger,
    logger,
    parent_logger_name,
    register_logger,
    reset_registry,
)


@pytest.fixture(autouse=True)
def fresh_registry(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    reset_registry()
    yield
    reset_registry()


def read(path):
    return path.read_text(encoding="utf-8")


def test_default_logger_level_is_max():
    assert logger().get_log_level() == LogLevel.MAX
    assert logger().module_name == DEFAULT_LOGGER_NAME


def test_default_logger_writes_prefixed_messages(tmp_path):
    root = logger()
    assert root.log("Root log level - 4\n") is True
    assert root.log("debug message\n", LogLevel.DEBUG) is True
    assert root.log("status message\n", LogLevel.STATUS) is True
    assert read(tmp_path / DEFAULT_LOGGER_FILE) == (
        "LOG (MAX): Root log level - 4\n"
        "LOG (DEBUG): debug message\n"
        "LOG (STATUS): status message\n"
    )


def test_registered_module_logs_at_its_level(tmp_path):
    register_logger("a", level=LogLevel.STATUS)
    assert logger("a").log("This message is going out to a.\n") is True
    assert read(tmp_path / DEFAULT_LOGGER_FILE) == (
        "a (STATUS): This message is going out to a.\n"
    )


def test_child_suppresses_debug(tmp_path):
    register_logger("a", level=LogLevel.STATUS)
    register_logger("a::b", level=LogLevel.STATUS)
    assert logger("a::b").log("this message is going out to a::b\n") is True
    assert logger("a::b").log("We should not see this message.\n", LogLevel.DEBUG) is False
    text = read(tmp_path / DEFAULT_LOGGER_FILE)
    assert "a::b (STATUS): this message is going out to a::b\n" in text
    assert "We should not see" not in text


def test_unparented_child_uses_own_level(tmp_path):
    register_logger("c::d", level=LogLevel.STATUS)
    cd = logger("c::d")
    assert cd.get_log_level() == LogLevel.STATUS
    assert cd.log("This is a test.\n") is True
    assert cd.log("Should not see this message.\n", LogLevel.DEBUG) is False
    assert read(tmp_path / DEFAULT_LOGGER_FILE) == "c::d (STATUS): This is a test.\n"


def test_parent_level_caps_child():
    register_logger("p", level=LogLevel.STATUS)
    register_logger("p::q", level=LogLevel.MAX)
    assert logger("p::q").get_log_level() == LogLevel.STATUS


def test_parent_logger_name():
    register_logger("a")
    register_logger("x")
    assert parent_logger_name("a::b") == "a"
    assert parent_logger_name("c::d") == DEFAULT_LOGGER_NAME
    assert parent_logger_name("x::y::z") == "x"
    assert parent_logger_name("plain") == DEFAULT_LOGGER_NAME


def test_parent_logger_name_prefers_nearest():
    register_logger("x")
    register_logger("x::y")
    assert parent_logger_name("x::y::z") == "x::y"


def test_missing_logger_raises():
    with pytest.raises(KeyError):
        logger("missing")


def test_register_twice_keeps_first():
    first = register_logger("m", level=LogLevel.STATUS)
    second = register_logger("m", level=LogLevel.MAX)
    assert second is first
    assert logger("m").level == LogLevel.STATUS


def test_separate_files(tmp_path):
    other = tmp_path / "other.txt"
    register_logger("m", str(other), LogLevel.DEBUG)
    logger("m").log("hello\n")
    logger().log("root\n")
    assert read(other) == "m (DEBUG): hello\n"
    assert read(tmp_path / DEFAULT_LOGGER_FILE) == "LOG (MAX): root\n"


def test_shared_file_keeps_order(tmp_path):
    shared = tmp_path / "shared.txt"
    register_logger("one", str(shared), LogLevel.STATUS)
    register_logger("two", str(shared), LogLevel.STATUS)
    logger("one").log("first\n")
    logger("two").log("second\n")
    assert read(shared) == "one (STATUS): first\ntwo (STATUS): second\n"


def test_reset_forgets_loggers():
    register_logger("gone")
    reset_registry()
    with pytest.raises(KeyError):
        logger("gone")
    assert logger().level == LogLevel.MAX


def test_module_logger_default_level():
    assert ModuleLogger("f.txt", "z").level == LogLevel.DEBUG