import pytest

from aocsolutions.y2021.day08 import decode_entry, part1, part2

_ENTRIES = [
    ("be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb",
     "fdgacbe cefdb cefbgd gcbe"),
    ("edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec",
     "fcgedb cgb dgebacf gc"),
    ("fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef",
     "cg cg fdcagb cbg"),
    ("fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega",
     "efabcd cedba gadfec cb"),
    ("aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga",
     "gecf egdcabf bgf bfgea"),
    ("fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf",
     "gebdcfa ecba ca fadegcb"),
    ("dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf",
     "cefg dcbef fcge gbcadfe"),
    ("bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd",
     "ed bcgafe cdgba cbgef"),
    ("egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg",
     "gbdfcae bgc cg cgb"),
    ("gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc",
     "fgae cfgab fg bagce"),
]

EXAMPLE = "".join(f"{patterns} | {outputs}\n" for patterns, outputs in _ENTRIES)

_PATTERNS = "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab".split()


def test_part1_example():
    assert part1(EXAMPLE) == 26


def test_part2_example():
    assert part2(EXAMPLE) == 61229


def test_decode_single_entry():
    outputs = "cdfeb fcadb cdfeb cdbaf".split()
    assert decode_entry(_PATTERNS, outputs) == 5353


def test_segment_order_does_not_matter():
    assert decode_entry(_PATTERNS, ["ba", "bda"]) == 17


def test_unresolvable_patterns_rejected():
    with pytest.raises(ValueError):
        decode_entry(["abcde"], ["abcde"])