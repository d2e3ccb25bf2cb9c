"""Advent of Code 2015 solutions, days 1 to 20."""