from swiftcheck.core.extractor import (
    SINHALA_BLOCK_PATTERN,
    SINHALA_PATTERN,
    Found,
    NotFound,
    body_regex_tier,
    extract,
    extract_result,
    positional_tier,
    script_range_tier,
)


def test_sinhala_pattern_covers_exact_block_boundaries() -> None:
    assert SINHALA_PATTERN.fullmatch("\u0d80")
    assert SINHALA_PATTERN.fullmatch("\u0dff")
    assert SINHALA_PATTERN.search("\u0d7f") is None
    assert SINHALA_PATTERN.search("\u0e00") is None
    assert SINHALA_PATTERN.search("mama gedhara") is None
    assert SINHALA_BLOCK_PATTERN.fullmatch("මම ගෙදර")


def test_script_range_takes_last_matching_element(make_session) -> None:
    session = make_session(
        lambda text: "මම ගෙදර යනවා.",
        chrome=["සිංහල ලියන්න", "Singlish input"],
        output_in_textarea=False,
    )
    result = extract_result(session)
    assert result == Found("මම ගෙදර යනවා.", "script_range")


def test_script_range_wins_over_positional_control(make_session) -> None:
    session = make_session(lambda text: "positional output", chrome=["  සිංහල  "])
    assert extract(session) == "සිංහල"
    assert "control_values" not in session.calls


def test_positional_control_used_without_sinhala_text(make_session) -> None:
    session = make_session(lambda text: " Rs. 9875 ")
    session.fill_input("Rs. 9875")
    result = extract_result(session)
    assert result == Found("Rs. 9875", "positional")
    assert "body_text" not in session.calls


def test_positional_hit_with_empty_value_stops_the_chain(make_session) -> None:
    session = make_session(lambda text: "", chrome=["plain chrome"])
    assert positional_tier(session) == Found("", "positional")
    assert extract(session) == ""
    assert "body_text" not in session.calls


def test_positional_needs_two_controls(make_session) -> None:
    session = make_session(output_in_textarea=False)
    result = positional_tier(session)
    assert isinstance(result, NotFound)
    assert "1 control(s)" in result.reason


def test_body_regex_returns_first_block_trimmed(make_session) -> None:
    session = make_session(
        chrome=["Hello  මම ගෙදර  yes", "අපි යමු"],
        output_in_textarea=False,
        fail_on={"text_matches"},
    )
    assert body_regex_tier(session) == Found("මම ගෙදර", "body_regex")
    assert extract(session) == "මම ගෙදර"


def test_body_regex_first_match_may_be_whitespace_only(make_session) -> None:
    session = make_session(chrome=["a b", "මම"], output_in_textarea=False, fail_on={"text_matches"})
    assert body_regex_tier(session) == Found("", "body_regex")


def test_all_tiers_exhausted_returns_empty(make_session) -> None:
    session = make_session(lambda text: "Hello", chrome=["Singlish to Sinhala"], output_in_textarea=False)
    assert extract(session) == ""
    assert extract_result(session) == NotFound("exhausted")
    assert session.calls == [
        "text_matches", "control_values", "body_text",
        "text_matches", "control_values", "body_text",
    ]


def test_session_errors_fall_through_to_next_tier(make_session) -> None:
    session = make_session(lambda text: "ok", fail_on={"text_matches"})
    assert isinstance(script_range_tier(session), NotFound)
    assert extract(session) == "ok"


def test_extract_never_raises_when_every_probe_fails(make_session) -> None:
    session = make_session(fail_on={"text_matches", "control_values", "body_text"})
    assert extract(session) == ""
