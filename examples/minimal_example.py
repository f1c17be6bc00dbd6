# example: background history of the default Planck 2018 cosmology and a custom one

import numpy as np
import jax.numpy as jnp
import flrwtoolkit as flrw
from flrwtoolkit.core.constants import GYR_S

zs = jnp.array([0.0, 0.5, 1.0, 3.0, 10.0, 1100.0])

print(f"H0 = {flrw.hubble_constant():.2f} km/s/Mpc")
print(f"z_eq (matter-radiation)    = {flrw.z_eq_matter_radiation():.1f}")
print(f"z_eq (matter-dark energy)  = {flrw.z_eq_matter_dark_energy():.3f}")
print(f"age today                  = {flrw.age() / GYR_S:.3f} Gyr")

print(f"{'z':>8} {'H [km/s/Mpc]':>14} {'Omega_m':>9} {'Omega_r':>9} {'Omega_L':>9} {'t [Gyr]':>9}")
for z, H, om, orad, ol in zip(np.asarray(zs),
                              np.asarray(flrw.hubble_rate(zs)),
                              np.asarray(flrw.Omega_matter(zs)),
                              np.asarray(flrw.Omega_radiation(zs)),
                              np.asarray(flrw.Omega_dark_energy(zs))):
    t = flrw.age(float(z)) / GYR_S
    print(f"{z:8.1f} {H:14.2f} {om:9.5f} {orad:9.2e} {ol:9.5f} {t:9.4f}")

# matter only, no CMB: both equality redshifts are undefined
eds = flrw.make_cosmology(h=0.7, Omega_chi0=1.0, Omega_b0=0.0, T0_CMB_K=0.0)
for warning in eds.diagnostics:
    print(f"{warning.quantity}: {warning.reason}")
print(f"EdS age = {flrw.age(0, eds) / GYR_S:.3f} Gyr")
