"""Test package for the Gores aim trainer.

Core tests drive the scheduler, scene stack and scenes with a fake clock and
scripted input snapshots. The smoke tests run the pygame host headlessly with
SDL's dummy video driver. Run ``pytest`` from the project root.
"""
