#!/usr/bin/env python3
"""
Record and Export Example

Poses a stick figure by hand, records three keyframes, plays the result for a
few simulated frames and exports a sprite sheet next to this script.
"""

import math
from pathlib import Path

from stickanim import AnimationCatalog, Animator, PartialPose, PoseRecorder, SpriteSheetExporter, StickFigure


def main():
    figure = StickFigure()
    recorder = PoseRecorder(figure)

    # Arms down
    figure.set_pose(PartialPose(left_shoulder_angle=0.2, right_shoulder_angle=-0.2))
    recorder.capture(0.0)

    # Arms up, red head
    figure.set_pose(PartialPose(left_shoulder_angle=math.pi - 0.3, right_shoulder_angle=-(math.pi - 0.3),
                                head_color="#FF6B6B"))
    recorder.capture(0.5)

    # Back down
    figure.set_pose(PartialPose(left_shoulder_angle=0.2, right_shoulder_angle=-0.2, head_color="#FFD1A3"))
    recorder.capture(1.0)

    cheer = recorder.build("cheer", loop=True)
    catalog = AnimationCatalog([cheer])

    # Simulate a 60 FPS render loop for 1.5 seconds
    animator = Animator(StickFigure())
    animator.play(catalog.find_by_name("cheer"))
    for _ in range(90):
        animator.advance(1.0 / 60.0)
    print(f"Playback after 1.5s: {animator}")

    out_dir = Path(__file__).parent / "output"
    catalog.save(out_dir / "cheer.json")
    path = SpriteSheetExporter().export_sheet(cheer, StickFigure().get_pose(), out_dir / "cheer.png",
                                              frame_count=8, columns=4)
    print(f"Sprite sheet written to {path}")


if __name__ == '__main__':
    main()
