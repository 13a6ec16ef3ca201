"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of how results are printed or where they go.
It deals with Shapes, Calculators, Outputters and Connections.
"""
