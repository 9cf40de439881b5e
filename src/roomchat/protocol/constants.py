# Message type constants (lowercase is the canonical wire form)

# client -> server
T_REGISTER = "register"

# both directions (server re-wraps the payload as {"from", "message"})
T_MESSAGE = "message"

# server -> clients
T_USERS = "users"

# Envelope field names on the wire
F_MESSAGE_TYPE = "messageType"
F_DATA_ARRAY = "dataArray"
F_DATA = "data"

# Inner chat payload field names
F_FROM = "from"
F_TEXT = "message"
