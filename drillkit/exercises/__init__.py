"""Worked solutions for the exercise topics, as plain functions and classes."""