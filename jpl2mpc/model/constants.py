class CONVERTER:
  # Time Conversions
  SEC_PER_DAY = 24.0 * 60.0 * 60.0         # [seconds] per [day]

  # Distance Conversions
  KM_PER_AU = 1.495978707e+8               # [kilometers] per [astronomical unit]

  # Velocity Conversions
  AU_PER_DAY__PER__KM_PER_SEC = SEC_PER_DAY / KM_PER_AU  # [astronomical units/day] per [kilometers/second]


class OBLIQUITY:
  """
  Mean obliquity of the ecliptic at the J2000 epoch (~23.4 deg), stored as its sine and
  cosine so the ecliptic-to-equatorial rotation is exact to the digits given.
  """
  SIN_J2000 = 0.397777155931913701597179975942380896684
  COS_J2000 = 0.917482062069181825744000384639406458043


class JULIANDATE:
  # Plausible range for the leading number of a Horizons epoch line
  MIN = 2000000.0                          # [days] inclusive
  MAX = 3000000.0                          # [days] exclusive

  # The integer part of a Horizons JDTDB field has seven digits
  INT_FIELD_WIDTH = 7


class HORIZONSMARKERS:
  """
  Literal strings that identify metadata and section boundaries in a Horizons text ephemeris.
  """
  # Table type
  VELOCITY_LABELS = "   VX    VY    VZ"

  # Reference frame
  EQUATORIAL = (
    "Earth Mean Equator and Equinox",
    "Reference frame : ICRF",
  )
  ECLIPTIC = (
    "Ecliptic and Mean Equinox of Reference Epoch",
    "Reference frame : Ecliptic of J2000",
  )

  # Object identification
  REVISED        = " Revised:"
  REVISED_ID_COL = 71
  TARGET_BODY    = "Target body name:"
  TARGET_BODY_ID = "(-"

  # Units
  KM_S_UNITS = "Output units    : KM-S"

  # Data section
  START_OF_EPHEMERIS = "$$SOE"


class OUTPUTFORMAT:
  """
  Fixed-width layout of the DASO / eph2tle output.
  """
  # Header: start JD, step size [days], record count
  HEADER_FIELDS = "{start_jd:13.5f} {step_size:14.10f} {count:4d}"

  # Fixed frame/unit code ("ecliptic J2000, AU, days") written on every file
  FRAME_UNIT_CODE = " 0,1,1"

  # Object name annotation on the header line
  OBJECT_NAME = " (500) Geocentric: {object_name}"

  # Records
  EPOCH    = "{jd:13.5f}"
  POSITION = "{x:16.10f}{y:16.10f}{z:16.10f}"
  VELOCITY = " {vx:16.12f}{vy:16.12f}{vz:16.12f}"

  # Provenance trailer
  TRAILER = "\nCreated from Horizons data by 'jpl2mpc', ver {version}\n"
