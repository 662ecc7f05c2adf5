"""Services package: timestamp codec, cue settings grammar, scanners and serializers."""
