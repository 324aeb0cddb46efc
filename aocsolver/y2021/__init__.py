"""Advent of Code 2021 solutions, days 1 to 13, and shared helpers."""