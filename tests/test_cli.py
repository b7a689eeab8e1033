import pytest

from polypanel.cli import _pair, build_parser, main


def test_list_prints_assignment(capsys):
    assert main(['--list']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 24
    assert lines[0] == ' 0  spiral'
    assert lines[-1] == '23  C60Center'


def test_render_small_image(tmp_path, capsys):
    out = tmp_path / 'cli.png'
    assert main(['--output', str(out), '--size', '600x400']) == 0
    assert out.exists()
    assert capsys.readouterr().out.strip() == str(out)


def test_grid_too_small_fails(tmp_path):
    out = tmp_path / 'cli.png'
    assert main(['--output', str(out), '--size', '600x400', '--grid', '2x2']) == 1
    assert not out.exists()


@pytest.mark.parametrize('text', ['600', '600x', 'ax4', '0x4', '1x2x3'])
def test_bad_pairs(text):
    with pytest.raises(SystemExit):
        build_parser().parse_args(['--size', text])


def test_pair():
    assert _pair('1920x1280') == (1920, 1280)
    assert _pair('4X6') == (4, 6)


def test_list_checks_the_grid(capsys):
    assert main(['--list', '--grid', '2x2']) == 1
    assert capsys.readouterr().out == ''


def test_list_accepts_a_larger_grid(capsys):
    assert main(['--list', '--grid', '5x6']) == 0
    assert len(capsys.readouterr().out.splitlines()) == 24
