"""LeetCode problem search proxy."""
