from out_file import OutFile


def test_first_section_has_no_leading_blank_line():
    out = OutFile()
    out.next_section()
    out.writeln("a")
    assert out.content() == "a\n"


def test_sections_are_separated_by_one_blank_line():
    out = OutFile()
    out.writeln("a")
    out.next_section()
    out.next_section()
    out.writeln("b")
    out.writeln("c")
    assert out.content() == "a\n\nb\nc\n"


def test_pending_section_waits_for_real_text():
    out = OutFile()
    out.writeln("a")
    out.next_section()
    out.write("")
    assert out.content() == "a\n"
    out.write("b")
    assert out.content() == "a\n\nb"


def test_section_after_partial_line_finishes_the_line():
    out = OutFile()
    out.write("a")
    out.next_section()
    out.write("b\n")
    assert out.content() == "a\n\nb\n"


def test_is_empty():
    out = OutFile()
    assert out.is_empty()
    out.writeln()
    assert not out.is_empty()
    assert out.content() == "\n"
