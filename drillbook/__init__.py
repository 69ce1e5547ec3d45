"""Solutions to small programming drills: arithmetic, loops, strings, recursion and search."""

__version__ = "0.1.0"
__all__ = ["basics", "loops", "practice", "strings", "recursion", "brute_force", "cli"]