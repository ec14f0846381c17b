import pytest

from puzzlebox.handheld import Instruction, Program, ProgramError, main, parse

EXAMPLE = """nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6"""


def test_parse_example():
    assert parse(EXAMPLE) == Program(
        [
            Instruction("nop", 0),
            Instruction("acc", 1),
            Instruction("jmp", 4),
            Instruction("acc", 3),
            Instruction("jmp", -3),
            Instruction("acc", -99),
            Instruction("acc", 1),
            Instruction("jmp", -4),
            Instruction("acc", 6),
        ]
    )


def test_parse_skips_unknown_lines():
    assert parse("acc +2\nbogus +1\n\njmp -1") == Program(
        [Instruction("acc", 2), Instruction("jmp", -1)]
    )


def test_run_detects_loop_with_accumulator():
    with pytest.raises(ProgramError, match="instruction ran twice") as info:
        parse(EXAMPLE).run()
    assert info.value.accumulator == 5


def test_run_with_self_heal_example():
    assert parse(EXAMPLE).run_with_self_heal() == 8


def test_run_terminating_program():
    assert parse("acc +3\nnop +0\nacc -1").run() == 2


def test_empty_program_returns_zero():
    assert Program().run() == 0


def test_run_out_of_bounds():
    with pytest.raises(ProgramError, match="out of bounds") as info:
        parse("acc +7\njmp +5").run()
    assert info.value.accumulator == 7


def test_unhealable_program():
    with pytest.raises(ProgramError, match="unable to self heal") as info:
        parse("jmp +0\njmp -1").run_with_self_heal()
    assert info.value.accumulator == -1


def test_self_heal_leaves_original_untouched():
    program = parse(EXAMPLE)
    program.run_with_self_heal()
    assert program.instructions[7] == Instruction("jmp", -4)


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "boot.txt"
    path.write_text(EXAMPLE + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "5 (instruction ran twice)\n8\n"