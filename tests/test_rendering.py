import importlib

from lcg_lab import config, rendering
from lcg_lab.plot_mapper import map_to_plot
from lcg_lab.rendering import ScatterPlot, format_labels, format_table, samples_to_frame
from lcg_lab.utils.entities import GeneratorParams, LCGGenerator


def textbook_samples(n=5):
    return LCGGenerator(GeneratorParams(multiplier=5, increment=3, modulus=16, seed=1)).generate_normalized(n)


def test_labels_are_one_based():
    labels = format_labels(textbook_samples())
    assert labels[0] == ("X1: 8", "u1: 0.50000")
    assert labels[1] == ("X2: 11", "u2: 0.68750")
    assert labels[-1] == ("X5: 12", "u5: 0.75000")


def test_table_text():
    lines = format_table(textbook_samples(3)).splitlines()
    assert len(lines) == 3
    assert lines[2].startswith("X3: 10")
    assert lines[2].endswith("u3: 0.62500")


def test_frame():
    frame = samples_to_frame(textbook_samples())
    assert list(frame.index) == [1, 2, 3, 4, 5]
    assert frame["raw"].tolist() == [8, 11, 10, 5, 12]
    assert frame.loc[4, "normalized"] == 0.3125


def test_scatter_plot_saves_image(tmp_path):
    plot = ScatterPlot()
    try:
        points = map_to_plot(textbook_samples(20), plot.region)
        plot.plot(points)
        assert plot.points == points
        output = tmp_path / "scatter.png"
        plot.save(str(output))
        assert output.exists()
        assert output.stat().st_size > 0
    finally:
        plot.close()


def test_scatter_plot_clear():
    plot = ScatterPlot()
    try:
        plot.plot(map_to_plot(textbook_samples(), plot.region))
        plot.clear()
        assert plot.points == []
        # после очистки остаются только две линии осей
        assert len(plot.ax.lines) == 2
        assert len(plot.ax.patches) == 0
    finally:
        plot.close()


def test_select_backend_empty_keeps_default(monkeypatch):
    calls = []
    monkeypatch.setattr(rendering.matplotlib, "use", lambda name: calls.append(name))
    rendering.select_backend("")
    assert calls == []
    rendering.select_backend("Agg")
    assert calls == ["Agg"]


def test_backend_not_forced_by_default(monkeypatch):
    monkeypatch.delenv("MPL_BACKEND", raising=False)
    try:
        assert importlib.reload(config).MPL_BACKEND == ""
    finally:
        monkeypatch.undo()
        importlib.reload(config)
