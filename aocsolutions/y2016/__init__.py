"""Advent of Code 2016 solutions, day 1."""