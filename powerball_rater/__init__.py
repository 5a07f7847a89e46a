"""Frequency-weighted PowerBall ticket generator and rater."""
