from philosim.cli import main


def test_too_few_arguments_prints_hint(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "girl, you're supposed to give more arguments?\n"


def test_two_arguments_prints_hint(capsys):
    assert main(["5", "800"]) == 0
    assert "more arguments" in capsys.readouterr().out


def test_three_arguments_is_an_error(capsys):
    assert main(["5", "800", "200"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "philo:" in captured.err


def test_no_philosophers_is_an_error(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert "philosopher" in capsys.readouterr().err


def test_single_philosopher_run(capsys):
    assert main(["1", "60", "20", "20"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert sum(line.endswith(" 1 died") for line in lines) == 1


def test_meal_limited_run(capsys):
    assert main(["2", "400", "20", "20", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum(line.endswith("is eating") for line in lines) == 2
    assert not any(line.endswith("died") for line in lines)