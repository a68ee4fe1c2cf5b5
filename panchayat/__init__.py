"""Village election core: a fixed roster, one vote per registered voter.

The concrete election lives in `panchayat.election`, the abstract contract in
`panchayat.abc.election`.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
