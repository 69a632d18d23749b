from .util import quat, quat_tensor
