"""School Attendance package.

Front-end logic for a school attendance recap backed by a spreadsheet web
app. Organized by feature (roster, attendance, recap, reports, school,
maintenance) with a thin Flask controller layer over service/repository
layers.
"""
