"""Advent of Code 2019 solutions, days 1 to 4, and the Intcode machine."""