from pumping_lab import recognizers


def test_a_star_b_star() -> None:
    assert recognizers.a_star_b_star("")
    assert recognizers.a_star_b_star("aab")
    assert not recognizers.a_star_b_star("ba")


def test_ab_star() -> None:
    assert recognizers.ab_star("abab")
    assert not recognizers.ab_star("aba")


def test_a_n_b_n() -> None:
    assert recognizers.a_n_b_n("")
    assert recognizers.a_n_b_n("aaabbb")
    assert not recognizers.a_n_b_n("abb")
    assert not recognizers.a_n_b_n("aaaabbbbb")
    assert not recognizers.a_n_b_n("abab")


def test_palindrome() -> None:
    assert recognizers.palindrome("abcba")
    assert not recognizers.palindrome("abc")


def test_a_n_b_n_c_n() -> None:
    assert recognizers.a_n_b_n_c_n("aabbcc")
    assert not recognizers.a_n_b_n_c_n("aabbc")
    assert not recognizers.a_n_b_n_c_n("abcabc")
