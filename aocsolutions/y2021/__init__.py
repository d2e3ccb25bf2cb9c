"""Advent of Code 2021 solutions, days 1 to 3 and 5 to 13."""