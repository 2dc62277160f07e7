"""
The CONTROLLER layer wires the model components together and translates
intents into navigation requests.
"""
