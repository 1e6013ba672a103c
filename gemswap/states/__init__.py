"""Game states: filling empty slots, resolving matches, mouse input, hints and delays."""