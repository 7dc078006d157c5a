# Defaults observed in real search traffic, see https://valentin.app/uule.html

# UULEv2
USER_SPECIFIED_FOR_REQUEST = 1
LOGGED_IN_USER_SPECIFIED = 12
DEFAULT_PROVENANCE = 0
UNSPECIFIED_RADIUS = -1

# UULEv1
UULEV1_ROLE = 2
UULEV1_PRODUCER = 32

UULEV1_PREFIX = "w+"
UULEV2_PREFIX = "a+"
