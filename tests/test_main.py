from lcg_lab.config import CONFIRM_THRESHOLD
from lcg_lab.main import ask_confirmation, main
from lcg_lab.rendering import ScatterPlot
from lcg_lab.validation import Decision


def test_prints_table(capsys):
    assert main(["--seed", "1", "--multiplier", "5", "--increment", "3", "--count", "5"]) == 0
    out = capsys.readouterr().out
    assert "Модуль m = 8" in out
    assert "X1: 8" not in out  # m = 8: X1 = (5 * 1 + 3) mod 8 = 0
    assert "X1: 0" in out
    assert "u5:" in out


def test_fixed_modulus(capsys):
    code = main(["--count", "5", "--modulus", "16", "--modulus-source", "fixed"])
    assert code == 0
    out = capsys.readouterr().out
    assert "X1: 8" in out
    assert "X5: 12" in out
    assert "u2: 0.68750" in out


def test_invalid_input(capsys):
    assert main(["--count", "0"]) == 1
    captured = capsys.readouterr()
    assert "count" in captured.err
    assert captured.out == ""


def test_cancel(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "n")
    assert main(["--count", "150"]) == 0
    assert capsys.readouterr().out == ""


def test_confirm_and_save_plot(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "y")
    output = tmp_path / "plot.png"
    assert main(["--count", "150", "--output", str(output), "--analyze"]) == 0
    out = capsys.readouterr().out
    assert "Модуль m = 256" in out
    assert "X150:" in out
    assert "Условия Халла" in out
    assert output.exists()


def test_frame_output(capsys):
    assert main(["--count", "5", "--frame"]) == 0
    out = capsys.readouterr().out
    assert "normalized" in out
    assert "X1:" not in out


def test_closed_stdin_cancels(monkeypatch, capsys):
    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert ask_confirmation(150) is Decision.CANCEL
    assert main(["--count", "150"]) == 0
    assert capsys.readouterr().out == ""


def test_prompt_mentions_threshold(monkeypatch):
    prompts = []
    monkeypatch.setattr("builtins.input", lambda prompt="": prompts.append(prompt) or "y")
    assert ask_confirmation(150) is Decision.PROCEED
    assert f"больше {CONFIRM_THRESHOLD}" in prompts[0]


def test_plot_closed_on_error_and_cancel(monkeypatch, tmp_path):
    closed = []
    original_close = ScatterPlot.close

    def recording_close(self):
        closed.append(self)
        original_close(self)

    monkeypatch.setattr(ScatterPlot, "close", recording_close)
    monkeypatch.setattr("builtins.input", lambda prompt="": "n")
    output = str(tmp_path / "plot.png")

    assert main(["--count", "0", "--output", output]) == 1
    assert main(["--count", "150", "--output", output]) == 0
    assert len(closed) == 2
