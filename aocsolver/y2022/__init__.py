"""Advent of Code 2022 solutions, days 1 to 11."""