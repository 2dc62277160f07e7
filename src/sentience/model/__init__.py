"""
The MODEL layer contains pure state machines and simulation logic.
It has NO knowledge of the GUI (Qt). Time comes in through a Scheduler,
so everything here can be driven by a fake clock.
"""
