import pytest

from genengine.log_config import Config
from genengine.log_context import Context, Sink
from genengine.log_instance import ConsoleSink, DuplicateError, FileSink, Instance
from genengine.log_level import Level, Target


class Recorder(Sink):
    def __init__(self):
        self.records = []

    def handle(self, formatted, context):
        self.records.append((formatted, context))


@pytest.fixture
def make_instance(tmp_path):
    created = []

    def factory(config=None, name="test.log"):
        inst = Instance(str(tmp_path / name), config)
        created.append(inst)
        return inst

    yield factory
    for inst in created:
        inst.close()


def test_duplicate_instance_raises(make_instance):
    make_instance()
    with pytest.raises(DuplicateError):
        make_instance(name="other.log")


def test_duplicate_error_is_runtime_error(make_instance):
    first = make_instance()
    with pytest.raises(RuntimeError) as info:
        make_instance(name="other.log")
    assert isinstance(info.value, DuplicateError)
    assert Instance._current is first


def test_new_instance_after_close(make_instance, tmp_path):
    first = make_instance()
    first.close()
    second = make_instance(name="again.log")
    assert Instance._current is second


def test_startup_message_on_stdout(make_instance, tmp_path, capsys):
    make_instance()
    out = capsys.readouterr().out
    assert "[I]" in out
    assert "[logger]" in out
    assert f"logging to file: {tmp_path / 'test.log'}" in out


def test_error_goes_to_stderr(make_instance, capsys):
    make_instance()
    capsys.readouterr()
    Instance.emit("bad thing", Context.make("core", Level.ERROR))
    captured = capsys.readouterr()
    assert "bad thing" in captured.err
    assert "bad thing" not in captured.out


def test_emit_without_instance_is_silent(capsys):
    Instance.emit("nobody listens", Context.make("core", Level.ERROR))
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_max_level_filters(make_instance):
    inst = make_instance(Config(max_level=Level.WARN))
    rec = Recorder()
    inst.add_sink(rec)
    Instance.emit("info", Context.make("core", Level.INFO))
    Instance.emit("warn", Context.make("core", Level.WARN))
    messages = [formatted for formatted, _ in rec.records]
    assert len(messages) == 1
    assert "warn" in messages[0]


def test_category_override(make_instance):
    config = Config(max_level=Level.ERROR, category_max_levels={"chatty": Level.DEBUG, "quiet": Level.ERROR})
    inst = make_instance(config)
    rec = Recorder()
    inst.add_sink(rec)
    Instance.emit("a", Context.make("chatty", Level.DEBUG))
    Instance.emit("b", Context.make("quiet", Level.WARN))
    Instance.emit("c", Context.make("other", Level.INFO))
    assert [ctx.category for _, ctx in rec.records] == ["chatty"]


def test_level_target_restricts_destination(make_instance, capsys):
    config = Config(level_targets={Level.WARN: Target.SINKS})
    inst = make_instance(config)
    rec = Recorder()
    inst.add_sink(rec)
    capsys.readouterr()
    Instance.emit("only sinks", Context.make("core", Level.WARN))
    captured = capsys.readouterr()
    assert "only sinks" not in captured.out
    assert len(rec.records) == 1
    assert "only sinks" in rec.records[0][0]


def test_add_none_sink_ignored(make_instance):
    inst = make_instance()
    inst.add_sink(None)
    rec = Recorder()
    inst.add_sink(rec)
    Instance.emit("x", Context.make("core", Level.DEBUG))
    assert len(rec.records) == 1


def test_get_config_returns_copy(make_instance):
    inst = make_instance(Config(max_level=Level.INFO))
    cfg = inst.get_config()
    cfg.category_max_levels["x"] = Level.ERROR
    cfg.max_level = Level.ERROR
    again = inst.get_config()
    assert again.max_level == Level.INFO
    assert again.category_max_levels == {}


def test_set_config_applies(make_instance):
    inst = make_instance()
    rec = Recorder()
    inst.add_sink(rec)
    inst.set_config(Config(format="<{message}>"))
    Instance.emit("body", Context.make("core", Level.INFO))
    assert rec.records[0][0] == "<body>\n"


def test_file_receives_entries(make_instance, tmp_path):
    path = tmp_path / "test.log"
    inst = make_instance(Config(format="{message}"))
    assert inst.get_config().format == "{message}"
    Instance.emit("to file", Context.make("core", Level.INFO))
    inst.close()
    content = path.read_text(encoding="utf-8")
    assert content == f"logging to file: {path}\nto file\n"


def test_existing_log_file_replaced(make_instance, tmp_path):
    path = tmp_path / "test.log"
    path.write_text("old contents\n", encoding="utf-8")
    inst = make_instance(Config(format="{message}"))
    assert inst.get_config().format == "{message}"
    Instance.emit("fresh", Context.make("core", Level.INFO))
    inst.close()
    content = path.read_text(encoding="utf-8")
    assert content == f"logging to file: {path}\nfresh\n"


def test_file_sink_writes_in_order(tmp_path):
    path = tmp_path / "sink.log"
    sink = FileSink(str(path))
    ctx = Context.make("core", Level.INFO)
    for word in ("one\n", "two\n", "three\n"):
        sink.handle(word, ctx)
    sink.close()
    assert path.read_text(encoding="utf-8") == "one\ntwo\nthree\n"


def test_console_sink_routes_by_level(capsys):
    sink = ConsoleSink()
    sink.handle("plain\n", Context.make("core", Level.INFO))
    sink.handle("oops\n", Context.make("core", Level.ERROR))
    captured = capsys.readouterr()
    assert captured.out == "plain\n"
    assert captured.err == "oops\n"


def test_context_manager_releases(tmp_path):
    with Instance(str(tmp_path / "cm.log")) as inst:
        assert Instance._current is inst
    assert Instance._current is None