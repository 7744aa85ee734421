from rowframe import MISSING, Series

readings = Series([12.5, None, 13.1, MISSING, float("nan"), 14.0, 0], "temperature")

print(readings)
print("mean", readings.mean(), "median", readings.median(), "p90", readings.quantile(0.9))
print(readings.fill_nullish(0).to_array())
print(readings.forward_fill().to_array())
print(readings.backward_fill().to_array())
