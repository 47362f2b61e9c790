import pytest

import challenges


@pytest.mark.parametrize("num", [1, 2, 3])
def test_challenge(num):
    challenges.get_challenges([num])[0]()


def test_get_all_challenges():
    assert challenges.get_all_challenges() == [
        challenges.challenge1, challenges.challenge2, challenges.challenge3]


def test_unknown_challenge():
    with pytest.raises(challenges.ChallengeNotFoundError):
        challenges.get_challenges([99])


def test_main_runs_all_challenges(capsys):
    assert challenges.main(["-q"]) == 0
    out = capsys.readouterr().out
    for num in (1, 2, 3):
        assert "Challenge {} passed.".format(num) in out
    assert "Cooking" not in out


def test_main_reports_failures(capsys):
    def challenge_broken():
        """Always fails"""
        raise AssertionError("broken")

    assert challenges.run_challenges([challenge_broken]) == 1
    captured = capsys.readouterr()
    assert "Running challenge _broken: Always fails" in captured.out
    assert "AssertionError: broken" in captured.err


def test_main_rejects_unknown_challenge():
    with pytest.raises(SystemExit):
        challenges.main(["42"])
