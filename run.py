import argparse
import torch
from orient import quat, quat_tensor

precision_to_dtype = {
    '32': torch.float32,
    '64': torch.float64,
}

def get_dtype(precision):
    if precision in precision_to_dtype:
        return precision_to_dtype[precision]
    else:
        raise ValueError(f"Precision '{precision}' is not recognized.")

def run(args):
    if args.device is None:
        q = quat(args.yaw, args.pitch, args.roll)
        print(f"Quaternion (w, x, y, z): {q}")
        return q

    dtype = get_dtype(args.precision)
    yaw = torch.full((args.num_envs,), args.yaw, dtype=dtype, device=args.device)
    pitch = torch.full((args.num_envs,), args.pitch, dtype=dtype, device=args.device)
    roll = torch.full((args.num_envs,), args.roll, dtype=dtype, device=args.device)
    q = quat_tensor(yaw, pitch, roll)
    print(f"Quaternion batch (w, x, y, z) on {q.device}, {q.dtype}:")
    print(q)
    return q

def arg_parser(argv=None):
    parser = argparse.ArgumentParser(description="Convert yaw/pitch/roll (radians) to a quaternion")
    parser.add_argument("-y", "--yaw", type=float, default=0.0, help="Rotation about Z in radians")
    parser.add_argument("-p", "--pitch", type=float, default=0.0, help="Rotation about Y in radians")
    parser.add_argument("-r", "--roll", type=float, default=0.0, help="Rotation about X in radians")
    parser.add_argument("-n", "--num_envs", type=int, default=1, help="Number of copies in the batch")
    parser.add_argument("-d", "--device", type=str, default=None, help="device: cpu or cuda:x or mps for macos; omit for numpy")
    parser.add_argument("--precision", type=str, default="32", choices=sorted(precision_to_dtype), help="Float width for the torch batch")

    args = parser.parse_args(argv)
    return args

if __name__ == "__main__":
    args = arg_parser()
    run(args)
