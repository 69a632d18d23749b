import functools
import numbers

import numpy as np
import torch

def quat(yaw, pitch, roll):
    """Convert yaw (Z), pitch (Y), roll (X) in radians to a (w, x, y, z) quaternion."""
    sr = np.sin(roll)
    cr = np.cos(roll)
    sp = np.sin(pitch)
    cp = np.cos(pitch)
    sy = np.sin(yaw)
    cy = np.cos(yaw)

    q = np.empty(4)
    q[0] = cr * cp * cy + sr * sp * sy  # w
    q[1] = sr * cp * cy - cr * sp * sy  # x
    q[2] = cr * sp * cy + sr * cp * sy  # y
    q[3] = cr * cp * sy - sr * sp * cy  # z
    return q

def quat_tensor(yaw, pitch, roll):
    """
    Batched version of quat() for one set of angles per env.

    yaw, pitch and roll are tensors (or numbers) broadcast against each other.
    Returns a tensor of shape (*batch, 4) ordered (w, x, y, z) on the inputs' device.
    """
    yaw, pitch, roll = _as_float_tensors(yaw, pitch, roll)
    sr = torch.sin(roll)
    cr = torch.cos(roll)
    sp = torch.sin(pitch)
    cp = torch.cos(pitch)
    sy = torch.sin(yaw)
    cy = torch.cos(yaw)

    w = cr * cp * cy + sr * sp * sy
    x = sr * cp * cy - cr * sp * sy
    y = cr * sp * cy + sr * cp * sy
    z = cr * cp * sy - sr * sp * cy
    return torch.stack([w, x, y, z], dim=-1)

def _as_float_tensors(*angles):
    tensors = [torch.as_tensor(a) for a in angles]
    # plain numbers don't widen the result; floating tensors and arrays promote together
    floats = [t.dtype for a, t in zip(angles, tensors) if not isinstance(a, numbers.Number) and t.is_floating_point()]
    dtype = functools.reduce(torch.promote_types, floats) if floats else torch.get_default_dtype()
    return [t.to(dtype) for t in tensors]
