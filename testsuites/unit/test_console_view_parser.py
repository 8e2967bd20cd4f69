import pytest

from testsuites.console_testing.framework.view_parser import ParsedView, parse_view


@pytest.mark.smoke
def test_input_and_output_are_separated():
    parsed = parse_view("Enter: <<5>>\nYou entered 5")
    assert parsed.input == "5"
    assert parsed.output == "Enter: \nYou entered 5"


def test_multiple_input_sections_are_concatenated_in_order():
    parsed = parse_view("First: <<Inigo\n>>Last: <<Montoya\n>>Hello Inigo Montoya")
    assert parsed == ParsedView("Inigo\nMontoya\n", "First: Last: Hello Inigo Montoya")


@pytest.mark.parametrize("view", ["", None])
def test_empty_view(view):
    assert parse_view(view) == ParsedView("", "")


def test_view_without_input_is_all_output():
    assert parse_view("Hello\nWorld") == ParsedView("", "Hello\nWorld")


def test_trailing_single_angle_bracket_is_literal_output():
    assert parse_view("a <") == ParsedView("", "a <")
    assert parse_view("a >") == ParsedView("", "a >")


def test_trailing_single_angle_bracket_inside_input_is_literal_input():
    assert parse_view("a <<b>") == ParsedView("b>", "a ")


def test_stray_close_token_in_output_is_kept():
    assert parse_view("x >> y") == ParsedView("", "x >> y")


def test_open_token_inside_input_is_kept_as_input():
    assert parse_view("<<a<<b>>c") == ParsedView("a<<b", "c")


def test_unterminated_input_consumes_rest_of_view():
    assert parse_view("Name: <<Bob") == ParsedView("Bob", "Name: ")


def test_characters_keep_relative_order_per_stream():
    view = "o1<<i1>>o2<<i2>>o3"
    parsed = parse_view(view)
    assert parsed.output == "o1o2o3"
    assert parsed.input == "i1i2"
    assert sorted(parsed.input + parsed.output) == sorted(view.replace("<<", "").replace(">>", ""))
