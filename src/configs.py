import numpy as np

#########################
# object (cube)
# Object extent along each side axis, in millimeters.
# [0] is shared by FRONT/BACK, [1] by LEFT/RIGHT
OBJECT_RATIOS = [44.0, 44.0]
# standoff distance from the object center to the robot start pose (mm)
CENTER_OFFSET = 60.0
# max lateral offset from the center of an edge (mm)
EDGE_OFFSET = 40.0
NUM_OFFSET = 5

#########################
# generic action space
GENERIC_SPEEDS = [0.5, 1.0]  # m/s
GENERIC_DURATIONS = [1.0]    # s
NUM_HEADING = 8

#########################
# object oriented action space
OBJECT_SPEEDS = [20.0, 50.0, 80.0]  # mm/s
# duration sent with every object oriented command (s)
OBJECT_ACTION_DURATION = 1.0

#########################
# angles
# normalized headings live in [ANGLE_MIN, ANGLE_MIN + 2pi)
ANGLE_MIN = -np.pi

#########################
# logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = "INFO"

#########################
# visualization
SIDE_COLORS = {
    'FRONT': (30/255, 144/255, 1.0),  # dodger blue
    'LEFT': (1.0, 127/255, 80/255),   # coral
    'BACK': (1.0, 215/255, 0.0),      # gold
    'RIGHT': (69/255, 139/255, 0.0),
}
OBJECT_COLOR = (150/255, 150/255, 150/255)
ARROW_LENGTH = 15.0
