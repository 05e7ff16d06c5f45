"""Work Hours package.

Clock-in/clock-out log with weekly totals. Organized by feature modules
(clock, reports) with a thin Flask controller layer over service/repository
layers.
"""
