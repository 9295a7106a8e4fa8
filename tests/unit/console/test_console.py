from linkstate.console import MyConsole, print


def test_console_is_cached():
    assert MyConsole() is MyConsole()


def test_print_renders_markup(capsys):
    print("[green]Accessible: 3[/green]")
    assert "Accessible: 3" in capsys.readouterr().out
