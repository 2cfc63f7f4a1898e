from controllers.generator_controller import NOTHING_TO_COPY_MESSAGE, GeneratorController
from models.block_spec import FormState


class FakeWriter:
    def __init__(self, result=True):
        self.result = result
        self.copied = []

    def copy(self, text):
        self.copied.append(text)
        return self.result


def _record(signal):
    received = []
    signal.connect(lambda *args: received.append(args[0] if len(args) == 1 else args))
    return received


def test_generate_emits_snippet(config):
    controller = GeneratorController(config, clipboard_writer=FakeWriter())
    generated = _record(controller.snippet_generated)
    failures = _record(controller.validation_failed)

    snippet = controller.generate(FormState(block_id="test_block", hardness_only="2.5"))

    assert snippet is not None
    assert generated == [snippet]
    assert failures == []
    assert "test_block.setHardness(2.5);" in snippet


def test_generate_invalid_identifier_emits_validation_failure(config):
    controller = GeneratorController(config, clipboard_writer=FakeWriter())
    generated = _record(controller.snippet_generated)
    failures = _record(controller.validation_failed)

    assert controller.generate(FormState(block_id="bad id")) is None
    assert controller.generate(FormState(block_id="")) is None

    assert generated == []
    assert len(failures) == 2
    assert failures[0] != failures[1]


def test_regenerate_replaces_output(config):
    controller = GeneratorController(config, clipboard_writer=FakeWriter())
    generated = _record(controller.snippet_generated)

    controller.generate(FormState(block_id="first"))
    controller.generate(FormState(block_id="second"))

    assert len(generated) == 2
    assert "first" not in generated[1]


def test_strict_hardness_comes_from_config(config):
    config.set("generator.strict_hardness", True)
    controller = GeneratorController(config, clipboard_writer=FakeWriter())

    snippet = controller.generate(FormState(block_id="b", hardness_only="0"))

    assert "setHardness" not in snippet


def test_copy_empty_or_placeholder_is_rejected(config):
    writer = FakeWriter()
    controller = GeneratorController(config, clipboard_writer=writer)
    rejected = _record(controller.copy_rejected)
    finished = _record(controller.copy_finished)

    assert controller.copy("") is None
    assert controller.copy("  \n") is None
    assert controller.copy(config.get("ui_settings.placeholder_text")) is None

    assert writer.copied == []
    assert finished == []
    assert rejected == [NOTHING_TO_COPY_MESSAGE] * 3


def test_copy_reports_writer_result(config):
    writer = FakeWriter(result=False)
    controller = GeneratorController(config, clipboard_writer=writer)
    finished = _record(controller.copy_finished)

    assert controller.copy("b.register();\n") is False
    assert writer.copied == ["b.register();\n"]
    assert finished == [False]


def test_copy_failure_hidden_when_reporting_disabled(config):
    config.set("clipboard.report_failure", False)
    controller = GeneratorController(config, clipboard_writer=FakeWriter(result=False))
    finished = _record(controller.copy_finished)

    assert controller.copy("b.register();\n") is True
    assert finished == [True]
