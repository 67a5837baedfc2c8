import pytest

from genengine.errors import GraphicsError, VulkanError, WindowingError
from genengine.log_config import Config
from genengine.log_context import Sink
from genengine.log_instance import Instance
from genengine.log_level import Level, Target


class _Capture(Sink):
    def __init__(self):
        self.entries = []

    def handle(self, formatted, context):
        self.entries.append((formatted, context))


@pytest.fixture
def capture(tmp_path):
    config = Config(format="{category}|{message}", level_targets={Level.ERROR: Target.SINKS})
    sink = _Capture()
    with Instance(str(tmp_path / "errors.log"), config) as instance:
        instance.add_sink(sink)
        yield sink


@pytest.mark.parametrize(
    "error_type, category",
    [(VulkanError, "vulkan"), (GraphicsError, "graphics"), (WindowingError, "windowing")],
)
def test_error_is_logged_under_category(capture, error_type, category):
    with pytest.raises(error_type) as info:
        raise error_type("device lost")
    assert str(info.value) == "device lost"
    formatted, context = capture.entries[-1]
    assert formatted == f"{category}|device lost\n"
    assert context.level == Level.ERROR
    assert context.category == category


@pytest.mark.parametrize("error_type", [VulkanError, GraphicsError, WindowingError])
def test_errors_are_runtime_errors(error_type):
    err = error_type("no logger running")
    assert isinstance(err, RuntimeError)
    assert str(err) == "no logger running"
    assert err.args == ("no logger running",)


def test_each_error_logs_once(capture):
    VulkanError("first")
    WindowingError("second")
    messages = [formatted for formatted, _ in capture.entries]
    assert messages == ["vulkan|first\n", "windowing|second\n"]