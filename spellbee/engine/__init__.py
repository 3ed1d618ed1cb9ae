from .dictionary import Dictionary, normalize_word_list, letters_of, is_seven_unique_letters
from .puzzle import (Puzzle, build_puzzle_from_pangram, find_pangram_candidates,
                     find_random_pangram, generate_puzzle, shuffle_letters)
from .validation import GuessOutcome, OUTCOME_MESSAGES, is_allowed_word, check_guess
from .scoring import score_word, is_pangram, total_score, max_score
from .stats import GroupKey, GroupCount, StatsSummary, compute_stats

__all__ = [
    "Dictionary", "normalize_word_list", "letters_of", "is_seven_unique_letters",
    "Puzzle", "build_puzzle_from_pangram", "find_pangram_candidates",
    "find_random_pangram", "generate_puzzle", "shuffle_letters",
    "GuessOutcome", "OUTCOME_MESSAGES", "is_allowed_word", "check_guess",
    "score_word", "is_pangram", "total_score", "max_score",
    "GroupKey", "GroupCount", "StatsSummary", "compute_stats",
]
