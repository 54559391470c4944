"""Graph data model, events and the planner base class."""
