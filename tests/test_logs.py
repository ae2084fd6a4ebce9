import pytest

from raytracer import logs


@pytest.mark.parametrize(
    "func, prefix",
    [
        (logs.debug, "[DEBUG]"),
        (logs.info, "[INFO]"),
        (logs.warn, "[WARN]"),
        (logs.warning, "[WARN]"),
        (logs.error, "[ERROR]"),
    ],
)
def test_prefix_and_formatting(capsys, func, prefix):
    func("Elapsed time: {0:.2f} seconds", 1.23)
    out = capsys.readouterr().out
    assert prefix in out
    assert out.endswith(": Elapsed time: 1.23 seconds\n")


def test_output_is_coloured_and_reset(capsys):
    logs.error("boom")
    out = capsys.readouterr().out
    assert out.startswith("\x1b[")
    assert "\x1b[0m" in out


def test_positional_arguments_in_order(capsys):
    logs.info("{} + {}", "a.vert", "b.frag")
    out = capsys.readouterr().out
    assert "a.vert + b.frag" in out


def test_missing_argument_raises():
    with pytest.raises(IndexError):
        logs.debug("{} {}", "only one")