"""Run-time helpers shared by the bugs-form suite and its command-line runner."""
