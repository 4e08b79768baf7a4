from philosophers.cli import main


def test_wrong_number_of_arguments(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().err == "Error: Wrong number of arguments\n"


def test_invalid_argument_value(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert capsys.readouterr().err == "Error: Invalid argument value.\n"


def test_invalid_number_of_meals(capsys):
    assert main(["5", "800", "200", "200", "0"]) == 1
    assert capsys.readouterr().err == "Error: Invalid number of meals.\n"


def test_single_philosopher_run(capsys):
    assert main(["1", "100", "50", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")


def test_meals_run_without_death(capsys):
    assert main(["3", "800", "40", "40", "2"]) == 0
    out = capsys.readouterr().out
    assert "is eating" in out
    assert " died" not in out