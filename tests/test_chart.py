from unittest.mock import MagicMock
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
from tracker.ui.chart import MatplotlibBarChart


def make_chart(labels, amounts):
    figure = Figure()
    FigureCanvasAgg(figure)
    redraw = MagicMock()
    return MatplotlibBarChart(figure, labels, amounts, redraw=redraw), redraw


def bar_heights(chart):
    return [patch.get_height() for patch in chart.ax.patches]


def test_chart_draws_one_bar_per_month():
    chart, redraw = make_chart(["March 2024", "April 2024"], [150.0, 10.0])

    assert bar_heights(chart) == [150.0, 10.0]
    assert [t.get_text() for t in chart.ax.get_xticklabels()] == ["March 2024", "April 2024"]
    assert chart.ax.get_legend().get_texts()[0].get_text() == "Amount"
    assert chart.ax.get_ylim()[0] == 0.0
    redraw.assert_called_once()


def test_update_replaces_data_in_place():
    chart, redraw = make_chart(["March 2024"], [150.0])
    ax = chart.ax

    chart.update(["March 2024", "April 2024"], [150.0, 10.0])

    assert chart.ax is ax
    assert chart.labels == ["March 2024", "April 2024"]
    assert chart.amounts == [150.0, 10.0]
    assert bar_heights(chart) == [150.0, 10.0]
    assert redraw.call_count == 2


def test_empty_chart():
    chart, _ = make_chart([], [])
    assert bar_heights(chart) == []
    assert chart.ax.get_ylim()[0] == 0.0
