"""Application – command handling and event-sourced projections."""
