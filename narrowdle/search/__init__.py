from .best_guess import SearchResult, best_guess, score_guess, score_guesses, search

__all__ = ["SearchResult", "best_guess", "score_guess", "score_guesses", "search"]
