"""Entry point for the robot arm simulator.

Sets up the arm world, event bus, systems, and Arcade window.
"""
import sys

from robot_arm.app import main

if __name__ == "__main__":
    sys.exit(main())
