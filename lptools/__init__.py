# This file is part of LPTools.
#
# LPTools is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# LPTools is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with LPTools.  If not, see <https://www.gnu.org/licenses/>.

# Make the main classes and function accessible from the root of LPTools.
from lptools import config
from lptools.domain import Domain
from lptools.inequality import Inequality
from lptools.polytope import BoundedLatticePolytope, scale, minkowski_sum
from lptools.shapes import (
    UnitSegment,
    RightStrictUnitSegment,
    LeftStrictUnitSegment,
    UnitCell,
    RightStrictUnitCell,
    LeftStrictUnitCell,
)

# Latest version
version = "0.1.0"
