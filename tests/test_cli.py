from xnetframe.cli import main


def test_main_prints_greeting(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "hello world\n"