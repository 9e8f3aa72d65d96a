import pytest

from algokit.strings import (
    INT_MAX,
    INT_MIN,
    compress,
    count_balanced_splits,
    customer_walkaways,
    decode_encrypted,
    duplicate_counts,
    first_unique_character,
    is_palindrome,
    is_subsequence,
    is_valid_shuffle,
    keypad_sequence,
    keypad_sequences,
    longest_common_prefix,
    parse_int,
    reverse_words,
    roman_to_decimal,
)


def _expand(encoded):
    result = []
    i = 0
    while i < len(encoded):
        ch = encoded[i]
        i += 1
        digits = ""
        while i < len(encoded) and encoded[i].isdigit():
            digits += encoded[i]
            i += 1
        result.append(ch * (int(digits) if digits else 1))
    return "".join(result)


@pytest.mark.parametrize("text", ["aabbbbbbbb", "abc", "zzzzzzzzzzzzq", "a"])
def test_compress_round_trip(text):
    assert _expand(compress(list(text))) == text


def test_compress_without_runs_is_unchanged():
    assert compress("abc") == "abc"


def test_compress_empty():
    assert compress([]) == ""


def test_compress_is_never_longer():
    text = "aabbbbbbbb"
    assert len(compress(text)) <= len(text)


def test_customer_walkaways_enough_computers():
    assert customer_walkaways(10, "ABBAJJKZKZ") == 0


def test_customer_walkaways_empty_sequence():
    assert customer_walkaways(1, "") == 0


def test_customer_walkaways_fewer_computers_never_fewer_walkaways():
    sequence = "GACCBDDBAGEE"
    counts = [customer_walkaways(n, sequence) for n in range(1, 6)]
    assert counts == sorted(counts, reverse=True)


def test_duplicate_counts_example():
    assert duplicate_counts("test string") == {"s": 2, "t": 3}


def test_duplicate_counts_ignores_case():
    assert duplicate_counts("AaBb") == duplicate_counts("aabb")


def test_duplicate_counts_only_repeats():
    counts = duplicate_counts("abcdefg hij")
    assert counts == {}


def test_keypad_sequences_shape():
    sequences = keypad_sequences()
    assert len(sequences) == 26
    assert sequences[0] == 2
    assert sequences[ord("S") - ord("A")] == 7777
    assert sequences[-1] == 9999


def test_keypad_sequence_concatenates():
    assert keypad_sequence("AB") == keypad_sequence("A") + keypad_sequence("B")


def test_keypad_sequence_case_insensitive():
    assert keypad_sequence("hello") == keypad_sequence("HELLO")


def test_keypad_sequence_rejects_non_letters():
    with pytest.raises(ValueError):
        keypad_sequence("A1")


def test_decode_encrypted_source_example():
    assert decode_encrypted("ab12c3") == "ab" * 12 + "c" * 3


def test_decode_encrypted_drops_trailing_letters():
    assert decode_encrypted("ab2cd") == "ab" * 2


def test_decode_encrypted_empty():
    assert decode_encrypted("") == ""


@pytest.mark.parametrize("text, expected", [("abba", True), ("abc", False), ("", True)])
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


def test_reverse_words_example():
    assert reverse_words("   Hello world ") == "world Hello"


def test_reverse_words_twice_normalises():
    text = "  the sky   is blue "
    assert reverse_words(reverse_words(text)) == " ".join(text.split())


def test_reverse_words_empty():
    assert reverse_words("   ") == ""


@pytest.mark.parametrize("numeral, expected", [("III", 3), ("IV", 4), ("IX", 9), ("MMDCCCXCIII", 2893)])
def test_roman_to_decimal(numeral, expected):
    assert roman_to_decimal(numeral) == expected


@pytest.mark.parametrize("numeral", ["", "ABC"])
def test_roman_to_decimal_rejects(numeral):
    with pytest.raises(ValueError):
        roman_to_decimal(numeral)


def test_count_balanced_splits_alternating():
    assert count_balanced_splits("01" * 5) == 5


def test_count_balanced_splits_none():
    assert count_balanced_splits("0000") is None


def test_is_valid_shuffle_true():
    assert is_valid_shuffle("xy12", "xy", "12") is True


def test_is_valid_shuffle_missing_character():
    assert is_valid_shuffle("xy1", "xy", "12") is False


def test_is_valid_shuffle_too_long():
    assert is_valid_shuffle("xy123", "xy", "12") is False


def test_is_subsequence_source_example():
    assert is_subsequence("ABD", "ABADE") is True


def test_is_subsequence_order_matters():
    assert is_subsequence("AEB", "ABADE") is False


def test_is_subsequence_empty_first():
    assert is_subsequence("", "xyz") is True


def test_longest_common_prefix_source_example():
    words = ["flower", "flow", "fing"]
    prefix = longest_common_prefix(words)
    assert prefix == "f"
    assert all(word.startswith(prefix) for word in words)


def test_longest_common_prefix_single_word():
    assert longest_common_prefix(["alone"]) == "alone"


def test_longest_common_prefix_empty():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_parse_int_source_example_clamps():
    assert parse_int("-9329879231231  ") == INT_MIN


def test_parse_int_clamps_high():
    assert parse_int("2147483648") == INT_MAX


@pytest.mark.parametrize("number", [0, 42, -42, 123456, INT_MAX, INT_MIN])
def test_parse_int_round_trip(number):
    assert parse_int(str(number)) == number


def test_parse_int_leading_spaces_and_trailing_words():
    assert parse_int("   -42 and more") == -42


@pytest.mark.parametrize("text", ["words and 987", "+-12", "--5", "+"])
def test_parse_int_malformed_gives_zero(text):
    assert parse_int(text) == 0


def test_first_unique_character_source_example():
    assert first_unique_character("AabBcC") == "A"


def test_first_unique_character_falls_back_to_first():
    assert first_unique_character("aabb") == "a"


def test_first_unique_character_empty():
    with pytest.raises(ValueError):
        first_unique_character("")