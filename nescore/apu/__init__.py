"""NES audio processing unit: envelope, pulse, triangle, noise and DMC channels, and the mixer."""