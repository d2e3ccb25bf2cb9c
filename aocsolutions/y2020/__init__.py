"""Advent of Code 2020 solutions, days 1 to 4."""