"""windscout.api - HTTP endpoints serving hexagon layers to the map client."""
