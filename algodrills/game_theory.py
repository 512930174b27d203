"""Two-player game outcomes under optimal play."""


def divisor_game(n: int) -> bool:
    """Return True if the first player wins the divisor game starting from n."""
    return n % 2 == 0