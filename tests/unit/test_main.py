"""Smoke test for the demo entry point."""

from morse_tree.main import main


def test_main_default_config(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Encoded: ... --- ... / .-- . / -. . . -.. / .... . .-.. .--." in out
    assert "Decoded: SOS WE NEED HELP" in out
    assert "Released" in out


def test_main_from_yaml(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("symbols:\n  dot: '*'\n  dash: '_'\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Encoded: *** ___ *** / " in out
    assert "Decoded: SOS WE NEED HELP" in out
