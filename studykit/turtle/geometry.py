import numpy as np
from typing import List

from studykit.turtle.turtle import SimpleTurtle, Point, Color


def draw_square(turtle: SimpleTurtle, side_length: float):
    if side_length < 0:
        raise ValueError('side length must be non-negative, got {}'.format(side_length))
    for _ in range(4):
        turtle.forward(side_length)
        turtle.turn(90)


def chord_length(radius: float, angle_in_degrees: float) -> float:
    '''
    Length of the chord subtending `angle_in_degrees` at the center of a
    circle of `radius`.
    '''
    if radius < 0:
        raise ValueError('radius must be non-negative, got {}'.format(radius))
    if not 0 <= angle_in_degrees <= 360:
        raise ValueError('angle must be within [0, 360], got {}'.format(angle_in_degrees))
    return float(2 * radius * np.sin(np.deg2rad(angle_in_degrees) / 2))


def draw_approximate_circle(turtle: SimpleTurtle, radius: float, num_sides: int):
    '''Draw a regular polygon with `num_sides` sides inscribed in a circle of `radius`.'''
    if num_sides < 3:
        raise ValueError('need at least 3 sides, got {}'.format(num_sides))
    central_angle = 360 / num_sides
    side = chord_length(radius, central_angle)
    for _ in range(num_sides):
        turtle.forward(side)
        turtle.turn(central_angle)


def distance(p1: Point, p2: Point) -> float:
    return float(np.hypot(p2.x - p1.x, p2.y - p1.y))


def find_path(turtle: SimpleTurtle, points: List[Point]) -> List[str]:
    '''
    Instructions that take the turtle through `points` in order, as
    "turn <degrees>" and "forward <units>" strings. Turns are normalized to
    (-180, 180]. The turtle itself is not moved.
    '''
    position = turtle.get_position()
    heading = turtle.get_heading()
    instructions = []
    for point in points:
        units = distance(position, point)
        if np.isclose(units, 0):
            continue
        target = float(np.degrees(np.arctan2(point.y - position.y, point.x - position.x)))
        angle = (target - heading) % 360
        if angle > 180:
            angle -= 360
        if not np.isclose(angle, 0):
            instructions.append('turn {:.2f}'.format(angle))
        instructions.append('forward {:.2f}'.format(units))
        position, heading = point, target % 360
    return instructions


def draw_personal_art(turtle: SimpleTurtle):
    # a rosette of colored squares ringed by a circle
    colors = [Color.red, Color.orange, Color.yellow, Color.green, Color.blue, Color.purple]
    for i in range(12):
        turtle.color(colors[i % len(colors)])
        draw_square(turtle, 40)
        turtle.turn(30)
    turtle.color(Color.gray)
    draw_approximate_circle(turtle, 60, 36)
