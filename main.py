"""
main.py — Bootstrap

1. Load tuning
2. Load the user's progress
3. Create the app
4. Push the level-select scene
5. Run

    python main.py [player-name]
"""

import sys
from core import tuning
from core.app import App
from core.save import load_progress
from scenes.level_select import LevelSelectScene


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    name = argv[0] if argv else "player"

    tuning.load()
    progress = load_progress(name)
    print(f"[MAIN] {progress.name}: levels 1-{progress.current_level} unlocked")

    app = App(title="Pursuit", width=640, height=480,
              fps=tuning.get("render", "fps", 60))
    app.progress = progress
    app.push_scene(LevelSelectScene())
    app.run()


if __name__ == "__main__":
    main()
