# Copyright (c) The RegLine Authors - All Rights Reserved

"Fitted straight lines, and their uncertainties."

from .equations import *
from .uncertain import *
