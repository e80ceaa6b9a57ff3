"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("srt", not "SchedulingPolicy.SRT")
- They work as FastAPI request fields and argparse choices
- Typos become immediate errors instead of silent bugs
"""

import enum


class SchedulingPolicy(str, enum.Enum):
    ROUND_ROBIN = "round_robin"  # Round Robin — time-sliced rotation
    SPN = "spn"                  # Shortest Process Next — non-preemptive, by total need
    SRT = "srt"                  # Shortest Remaining Time — preemptive, by remaining need
    HRRN = "hrrn"                # Highest Response Ratio Next — non-preemptive, by ratio
