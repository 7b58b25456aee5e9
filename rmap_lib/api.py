# --- rmap_lib/api.py ---
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from . import schema
from .decoder import RoomDecodeError, decode_room
from .rendering.ascii_renderer import ASCIIRenderer
from .rendering.png_renderer import render_room, save_png

log = logging.getLogger("rmap.api")


@dataclass
class BatchResult:
    """Outcome of a directory run: ids rendered, and paths skipped with the reason."""

    processed: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)


def room_id_from_filename(path: str, separator: str = "_Room_") -> str:
    """
    Derives a room's display id from its file name.

    'Crateria_Room_91F8.room' -> '91F8'. A stem without the separator is used
    whole.
    """
    stem = os.path.splitext(os.path.basename(path))[0]
    return stem.split(separator)[-1]


def process_room_file(
    path: str,
    output_dir: str,
    style_options: Optional[Dict[str, Any]] = None,
    id_separator: str = "_Room_",
    save_json: bool = False,
    ascii_debug: bool = False,
) -> schema.Room:
    """
    Decodes one room file and writes its PNG (and optionally JSON) to ``output_dir``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        RoomDecodeError: If the record is shorter than its header declares.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Room file not found: {path}")

    room_id = room_id_from_filename(path, id_separator)
    log.info("Processing room '%s' from %s", room_id, path)
    with open(path, "rb") as f:
        data = f.read()

    room = decode_room(data, room_id)
    log.info(
        "Room '%s': %dx%d tiles, %d cells.",
        room_id,
        room.width_tiles,
        room.height_tiles,
        len(room.cells),
    )

    if ascii_debug:
        renderer = ASCIIRenderer()
        renderer.render(room)
        log.info("\n%s", renderer.get_output(), extra={"raw": True})

    os.makedirs(output_dir, exist_ok=True)
    if save_json:
        json_path = os.path.join(output_dir, f"{room_id}.json")
        schema.save_json(room, json_path)
        log.info("Saved room data to '%s'", json_path)

    img = render_room(room, style_options)
    save_png(img, os.path.join(output_dir, f"{room_id}.png"))
    return room


def process_directory(
    input_dir: str,
    output_dir: str,
    extension: str = ".room",
    style_options: Optional[Dict[str, Any]] = None,
    id_separator: str = "_Room_",
    save_json: bool = False,
    ascii_debug: bool = False,
) -> BatchResult:
    """
    Renders every room file in ``input_dir``, in name order.

    A record that fails to read or decode is logged and skipped; the rest of
    the batch still runs.
    """
    if not os.path.isdir(input_dir):
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    result = BatchResult()
    names = sorted(
        n
        for n in os.listdir(input_dir)
        if n.endswith(extension) and os.path.isfile(os.path.join(input_dir, n))
    )
    log.info("Found %d '%s' files in %s", len(names), extension, input_dir)

    for name in names:
        path = os.path.join(input_dir, name)
        try:
            room = process_room_file(
                path,
                output_dir,
                style_options=style_options,
                id_separator=id_separator,
                save_json=save_json,
                ascii_debug=ascii_debug,
            )
        except RoomDecodeError as e:
            log.error("Skipping malformed room %s: %s", path, e)
            result.failed[path] = str(e)
            continue
        except OSError as e:
            log.error("Skipping unreadable room %s: %s", path, e)
            result.failed[path] = str(e)
            continue
        result.processed.append(room.room_id)

    log.info(
        "Batch complete: %d rendered, %d skipped.", len(result.processed), len(result.failed)
    )
    return result
