import sys
from types import SimpleNamespace

import pytest

import voicetidy.main as main
from conftest import FakeLLMService, FakeTranscriptionService, make_pipeline
from voicetidy import dependencies

RAW = "um so like i think uh this works"


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("MISTRAL_API_KEY", "mistral-test")
    monkeypatch.setenv("OPENAI_API_KEY", "openai-test")


def install_pipeline(monkeypatch, transcriber, llm):
    built = {}

    def fake_build_pipeline(config):
        built["config"] = config
        return make_pipeline(transcriber, llm)

    monkeypatch.setattr(dependencies, "build_pipeline", fake_build_pipeline)
    return built


def test_success_prints_only_cleaned_text(monkeypatch, credentials, audio_file, capsys):
    install_pipeline(
        monkeypatch,
        FakeTranscriptionService(text=RAW),
        FakeLLMService(reply="I think this works."),
    )

    assert main.main([str(audio_file)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "I think this works.\n"
    assert "Transcription completed" in captured.err


def test_cleanup_failure_prints_transcript(monkeypatch, credentials, audio_file, capsys):
    install_pipeline(
        monkeypatch,
        FakeTranscriptionService(text=RAW),
        FakeLLMService(error=RuntimeError("rate limited")),
    )

    assert main.main([str(audio_file)]) == 0

    captured = capsys.readouterr()
    assert captured.out == RAW + "\n"
    assert "falling back to original transcription" in captured.err


def test_transcription_failure_exits_nonzero(monkeypatch, credentials, audio_file, capsys):
    llm = FakeLLMService(reply="unused")
    install_pipeline(
        monkeypatch, FakeTranscriptionService(error=RuntimeError("500 Server Error")), llm
    )

    assert main.main([str(audio_file)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "500 Server Error" in captured.err
    assert llm.requests == []


def test_missing_file(monkeypatch, credentials, tmp_path, capsys):
    install_pipeline(monkeypatch, FakeTranscriptionService(), FakeLLMService())

    assert main.main([str(tmp_path / "nope.wav")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Audio file not found" in captured.err


def test_too_small_file(monkeypatch, credentials, tmp_path, capsys):
    path = tmp_path / "blip.wav"
    path.write_bytes(b"\x00" * 10)
    install_pipeline(monkeypatch, FakeTranscriptionService(), FakeLLMService())

    assert main.main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "too small" in captured.err


def test_missing_path_prints_usage(credentials, capsys):
    assert main.main([]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: voicetidy" in captured.err


@pytest.mark.parametrize(
    "present, missing", [("OPENAI_API_KEY", "MISTRAL_API_KEY"), ("MISTRAL_API_KEY", "OPENAI_API_KEY")]
)
def test_missing_credentials(monkeypatch, audio_file, capsys, present, missing):
    monkeypatch.setenv(present, "key")
    built = install_pipeline(monkeypatch, FakeTranscriptionService(), FakeLLMService())

    assert main.main([str(audio_file)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"{missing} environment variable is required" in captured.err
    assert built == {}


@pytest.mark.parametrize("flag", ["--alt-mode", "--gpt5"])
def test_alt_mode_selects_general_assistant(monkeypatch, credentials, audio_file, flag, capsys):
    llm = FakeLLMService(reply="Short answer.")
    install_pipeline(monkeypatch, FakeTranscriptionService(text=RAW), llm)

    assert main.main([flag, str(audio_file)]) == 0

    assert llm.requests[0].model == "gpt-5-mini"
    assert llm.requests[0].messages[1].content == RAW
    assert capsys.readouterr().out == "Short answer.\n"


def test_unknown_flags_are_ignored(monkeypatch, credentials, audio_file, capsys):
    install_pipeline(monkeypatch, FakeTranscriptionService(text=RAW), FakeLLMService(reply="ok"))

    assert main.main(["--verbose", str(audio_file)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "ok\n"
    assert "Ignoring unrecognized argument --verbose" in captured.err


def test_unexpected_error_exits_nonzero(monkeypatch, credentials, audio_file, capsys):
    def broken_build_pipeline(config):
        raise RuntimeError("wiring failed")

    monkeypatch.setattr(dependencies, "build_pipeline", broken_build_pipeline)

    assert main.main([str(audio_file)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "wiring failed" in captured.err


def test_invalid_configuration(monkeypatch, credentials, audio_file, capsys):
    monkeypatch.setenv("CLEANUP_PROVIDER", "anthropic")

    assert main.main([str(audio_file)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration" in captured.err


def test_json_log_format(monkeypatch, credentials, audio_file, capsys):
    install_pipeline(monkeypatch, FakeTranscriptionService(text=RAW), FakeLLMService(reply="ok"))

    assert main.main(["--log-format", "json", str(audio_file)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "ok\n"
    assert '"message": "Transcription completed: 32 characters' in captured.err


@pytest.mark.parametrize(
    "argv",
    [["--log-format", "xml", "note.wav"], ["note.wav", "--log-level"], ["--log-level", "loud", "note.wav"]],
)
def test_malformed_option_prints_usage(monkeypatch, credentials, argv, capsys):
    built = install_pipeline(monkeypatch, FakeTranscriptionService(), FakeLLMService())

    assert main.main(argv) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: voicetidy" in captured.err
    assert "voicetidy: error:" in captured.err
    assert built == {}


class ClosedStdout:
    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        raise BrokenPipeError(32, "Broken pipe")


def test_closed_stdout_exits_nonzero(monkeypatch, credentials, audio_file, capsys):
    install_pipeline(monkeypatch, FakeTranscriptionService(text=RAW), FakeLLMService(reply="ok"))
    monkeypatch.setattr(main, "sys", SimpleNamespace(stdout=ClosedStdout(), stderr=sys.stderr))

    assert main.main([str(audio_file)]) == 1

    assert "Output stream closed" in capsys.readouterr().err
