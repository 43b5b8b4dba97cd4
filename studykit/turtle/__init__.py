from .turtle import Point, PathSegment, Color, SimpleTurtle
from .geometry import draw_square, chord_length, draw_approximate_circle, \
    distance, find_path, draw_personal_art
