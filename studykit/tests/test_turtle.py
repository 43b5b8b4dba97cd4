import unittest

from studykit.turtle import Point, Color, SimpleTurtle, draw_square, chord_length, \
    draw_approximate_circle, distance, find_path, draw_personal_art


class TestSimpleTurtle(unittest.TestCase):

    def test_forward_and_turn(self):
        turtle = SimpleTurtle()
        turtle.forward(10)
        turtle.turn(90)
        turtle.forward(5)
        position = turtle.get_position()
        self.assertAlmostEqual(position.x, 10)
        self.assertAlmostEqual(position.y, 5)
        self.assertEqual(turtle.get_heading(), 90)
        self.assertEqual(len(turtle.get_path()), 2)

    def test_turn_wraps(self):
        turtle = SimpleTurtle()
        turtle.turn(400)
        self.assertEqual(turtle.get_heading(), 40)
        turtle.turn(-80)
        self.assertEqual(turtle.get_heading(), 320)

    def test_color(self):
        turtle = SimpleTurtle()
        turtle.color('red')
        turtle.forward(1)
        self.assertEqual(turtle.get_path()[0].color, Color.red)


class TestGeometry(unittest.TestCase):

    def test_square_closes(self):
        turtle = SimpleTurtle()
        draw_square(turtle, 100)
        path = turtle.get_path()
        self.assertEqual(len(path), 4)
        self.assertAlmostEqual(distance(path[-1].end, Point(0, 0)), 0)
        self.assertEqual(turtle.get_heading(), 0)
        with self.assertRaises(ValueError):
            draw_square(turtle, -1)

    def test_chord_length(self):
        self.assertAlmostEqual(chord_length(5, 60), 5)
        self.assertAlmostEqual(chord_length(5, 180), 10)
        self.assertAlmostEqual(chord_length(5, 0), 0)
        with self.assertRaises(ValueError):
            chord_length(-1, 60)
        with self.assertRaises(ValueError):
            chord_length(5, -60)
        with self.assertRaises(ValueError):
            chord_length(5, 400)
        self.assertAlmostEqual(chord_length(5, 360), 0)

    def test_approximate_circle(self):
        turtle = SimpleTurtle()
        draw_approximate_circle(turtle, 50, 360)
        path = turtle.get_path()
        self.assertEqual(len(path), 360)
        self.assertAlmostEqual(distance(path[-1].end, Point(0, 0)), 0, places=6)
        self.assertAlmostEqual(distance(path[0].start, path[0].end), chord_length(50, 1))
        with self.assertRaises(ValueError):
            draw_approximate_circle(turtle, 50, 2)

    def test_distance(self):
        self.assertEqual(distance(Point(1, 2), Point(4, 6)), 5)
        self.assertEqual(distance(Point(1, 2), Point(1, 2)), 0)
        self.assertEqual(distance(Point(0, 3), Point(0, -1)), 4)

    def test_find_path(self):
        turtle = SimpleTurtle()
        points = [Point(20, 0), Point(20, 20), Point(20, 20), Point(0, 20)]
        instructions = find_path(turtle, points)
        self.assertEqual(instructions, [
            'forward 20.00',
            'turn 90.00',
            'forward 20.00',
            'turn 90.00',
            'forward 20.00',
        ])
        # the turtle itself does not move
        self.assertEqual(turtle.get_position(), Point(0, 0))
        self.assertEqual(turtle.get_path(), [])

    def test_find_path_turns_shortest_way(self):
        turtle = SimpleTurtle()
        self.assertEqual(find_path(turtle, [Point(0, -10)]), ['turn -90.00', 'forward 10.00'])

    def test_personal_art(self):
        turtle = SimpleTurtle()
        draw_personal_art(turtle)
        colors = {segment.color for segment in turtle.get_path()}
        self.assertGreater(len(colors), 1)
