"""
Block-DCT Lab
Block DCT / colorspace round-trip experiments with SNR measurement
"""

import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

USAGE = (
    "Usage: python main.py <image_path> [block_size] [quant_step|0] [mode]\n"
    "       python main.py --synthetic [block_size] [quant_step|0] [mode]"
)


def run_cli(args):
    """Run one transform/reconstruct pass and report quality."""
    from models.transform_params import TransformParams
    from engines.pipeline import transform_reconstruct
    from utils.test_images import generate_gradient
    from utils.image_io import load_image, save_image
    from utils.filenames import strip_extension, output_filename
    from utils.errors import FilenameError

    if not args or args[0] == '--help':
        print(USAGE)
        return 0

    if args[0] == '--synthetic':
        print("Generating test image...")
        image = generate_gradient(256)
        name = 'synthetic'
    else:
        image_path = args[0]
        print(f"Loading: {image_path}")
        image = load_image(image_path)
        try:
            name = strip_extension(image_path)
        except FilenameError:
            name = image_path.rsplit('.', 1)[0]

    block_size = int(args[1]) if len(args) > 1 else 8
    # step 0 disables quantization
    quant_step = float(args[2]) if len(args) > 2 else 0.0
    quant_step = quant_step or None
    mode = args[3] if len(args) > 3 else '3d'

    params = TransformParams(block_size=block_size, mode=mode, quant_step=quant_step)

    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    print(f"Block: {params.block_size} ({params.mode})")
    print(f"Step:  {params.quant_step if params.quant_step is not None else 'none'}")

    result = transform_reconstruct(image, params)

    print("\n=== Results ===")
    print(f"SNR:       {result.snr_db:.2f} dB")
    print(f"MSE:       {result.mse:.4f}")
    if result.ssim is not None:
        print(f"SSIM:      {result.ssim:.4f}")
    print(f"Nonzero:   {result.nonzero_coeffs}/{result.total_coeffs}")
    print(f"Time:      {result.forward_time_ms + result.inverse_time_ms:.2f} ms")

    attr = int(round(quant_step)) if quant_step else 0
    out_path = output_filename('', f"{name}_rec", 'png', attr)
    save_image(result.reconstructed_image, out_path)
    print(f"\nSaved: {out_path}")
    return 0


def main():
    try:
        sys.exit(run_cli(sys.argv[1:]))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
