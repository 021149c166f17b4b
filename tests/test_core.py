import re

from fetchlib.core import FetchCore
from fetchlib.pluginApi import ModuleError


class CountingPlugin:
    typeName = "counting"
    displayName = "Counting"

    def __init__(self, arg: str | None = None, error: Exception | None = None) -> None:
        self.arg = arg
        self.error = error
        self.calls = 0

    def fetch(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return f"record {self.calls}"


def test_fetch_happens_at_most_once_per_module() -> None:
    core = FetchCore()
    pluginObj = CountingPlugin()

    first = core.fetchCached(pluginObj)
    second = core.fetchCached(pluginObj)

    assert first.ok
    assert first.record == "record 1"
    assert second is first
    assert pluginObj.calls == 1
    assert core.fetchCount(pluginObj) == 1


def test_cache_key_includes_argument() -> None:
    core = FetchCore()
    assert core.cacheKeyFor(CountingPlugin()) == "counting"
    assert core.cacheKeyFor(CountingPlugin(arg="sda")) == "counting:sda"


def test_module_error_is_kept_on_result() -> None:
    core = FetchCore()
    result = core.fetchCached(CountingPlugin(error=ModuleError("Counting", "no data")))

    assert not result.ok
    assert result.record is None
    assert str(result.error) == "Module Counting failed: no data"


def test_unexpected_exception_is_wrapped() -> None:
    core = FetchCore()
    result = core.fetchCached(CountingPlugin(error=ValueError("boom")))

    assert isinstance(result.error, ModuleError)
    assert str(result.error) == "Module Counting failed: ValueError: boom"
    assert any("boom" in ln for ln in core.commandLog)


def test_log_is_timestamped_ring_buffer() -> None:
    core = FetchCore()
    core.maxLogLines = 3
    logLines = core.commandLog
    for i in range(5):
        core.writeLog(f"msg {i}")

    assert len(core.commandLog) == 3
    assert core.commandLog is logLines
    assert core.commandLog[-1].endswith("msg 4")
    assert re.match(r"^\[\d\d:\d\d:\d\d\] msg 2$", core.commandLog[0])
