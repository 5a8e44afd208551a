import argparse
import time

from rainrtx.renderer import render, save_image
from rainrtx.scene_parser import parse_scene_file


def log_phase(label: str, seconds: float) -> None:
    print(f"[phase] {label}: {seconds:.2f}s")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description='Python Ray Tracer')
    parser.add_argument('scene_file', type=str, help='Path to the scene file')
    parser.add_argument('output_image', type=str, help='Name of the output image file')
    parser.add_argument('--width', type=int, default=500, help='Image width')
    parser.add_argument('--height', type=int, default=500, help='Image height')
    args = parser.parse_args(argv)

    parse_start = time.perf_counter()
    camera, scene = parse_scene_file(args.scene_file)
    log_phase("parse_scene", time.perf_counter() - parse_start)

    if camera is None:
        raise ValueError("Scene file is missing a camera ('cam' line)")

    render_start = time.perf_counter()
    image_array = render(camera, scene, args.width, args.height)
    log_phase("render", time.perf_counter() - render_start)

    save_start = time.perf_counter()
    save_image(image_array, args.output_image)
    log_phase("save_image", time.perf_counter() - save_start)


def run() -> None:
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")


if __name__ == '__main__':
    run()
