"""
BlurHash Studio
Compact blurred image placeholders: encode, decode and validate BlurHash strings
"""

import logging
import sys

logger = logging.getLogger("blurhash_studio")

USAGE = """Usage: python main.py encode <image_path> [components_x] [components_y]
       python main.py encode --synthetic [components_x] [components_y]
       python main.py decode <hash> <width> <height> <out_path> [punch]
       python main.py validate <hash>
       python main.py demo [image_key]"""


def run_encode(args):
    from engines.encoder import encode_image
    from models.blurhash_params import EncodeParams
    from utils.image_io import load_image_rgba
    from utils.test_images import generate_gradient

    if args[0] == '--synthetic':
        image = generate_gradient(64, 64)
    else:
        logger.info("Loading: %s", args[0])
        image = load_image_rgba(args[0])

    params = EncodeParams(
        components_x=int(args[1]) if len(args) > 1 else 4,
        components_y=int(args[2]) if len(args) > 2 else 3
    )
    logger.info("Image: %dx%d, components: %dx%d",
                image.shape[1], image.shape[0], params.components_x, params.components_y)

    print(encode_image(image, params.components_x, params.components_y))


def run_decode(args):
    from engines.decoder import decode_image
    from models.blurhash_params import DecodeParams
    from utils.image_io import save_image_rgba

    if len(args) < 4:
        print(USAGE)
        sys.exit(1)

    blurhash, out_path = args[0], args[3]
    params = DecodeParams(
        width=int(args[1]),
        height=int(args[2]),
        punch=float(args[4]) if len(args) > 4 else 1.0
    )

    image = decode_image(blurhash, params.width, params.height, params.punch)
    save_image_rgba(image, out_path)
    print(f"Saved: {out_path}")


def run_validate(args):
    from engines.validator import validate, components

    validate(args[0])
    components_x, components_y = components(args[0])
    print(f"Valid: {components_x}x{components_y} components")


def run_demo(args):
    from engines.pipeline import make_placeholder
    from models.blurhash_params import EncodeParams
    from utils.test_images import generate_demo_image

    key = args[0] if args else "gradient"
    image = generate_demo_image(key)
    if image is None:
        print(f"Unknown demo image: {key}")
        sys.exit(1)

    result = make_placeholder(image, EncodeParams(components_x=4, components_y=3))

    print("\n=== Results ===")
    print(f"Hash:      {result.blurhash}")
    print(f"Length:    {result.hash_length} chars")
    print(f"PSNR:      {result.psnr_rgb:.2f} dB")
    print(f"Ratio:     {result.compression_ratio:.1f}:1")
    print(f"Time:      {result.encode_time_ms + result.decode_time_ms:.2f} ms")


COMMANDS = {
    'encode': run_encode,
    'decode': run_decode,
    'validate': run_validate,
    'demo': run_demo,
}


def main():
    from engines.errors import BlurHashError

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    args = sys.argv[1:]
    if not args or args[0] == '--help' or args[0] not in COMMANDS:
        print(USAGE)
        sys.exit(0 if args and args[0] == '--help' else 1)

    command, command_args = args[0], args[1:]
    if command != 'demo' and not command_args:
        print(USAGE)
        sys.exit(1)

    try:
        COMMANDS[command](command_args)
    except BlurHashError as e:
        logger.warning("%s failed: %s", command, e)
        sys.exit(1)


if __name__ == '__main__':
    main()
