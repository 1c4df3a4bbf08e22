from unittest import mock

LOGIN_PAGE = """
<html><body>
<form method="post" action="/ppylogin/ppylogin">
  <input type="text" name="mli" value="">
  <input type="password" name="password" value="">
  <input type="hidden" name="__pybpp" value="pxQ7fyn2">
  <input type="hidden" name="__pybps" value="AGjA9">
  <input type="submit" name="dologin" value="Login">
</form>
</body></html>
"""

LOGIN_SUCCESS = """
<html><body><p>You have successfully authenticated to Passport York.</p></body></html>
"""

LOGIN_FAILURE = """
<html><body><p>Authentication failed. Please check your Passport York username.</p></body></html>
"""

COURSE_PAGE = """
<html><body>
<table class="heading"><tr><td>Course List</td></tr></table>
<table class="bodytext">
  <tr><th>Session</th><th>Course</th><th>Title</th><th>Grade</th></tr>
  <tr>
    <td>FW 2020</td>
    <td>SC MATH 1300 3.00</td>
    <td>Differential Calculus with Applications</td>
    <td>A+</td>
  </tr>
  <tr>
    <td> FW&nbsp;2020 </td>
    <td>LE EECS 1012 3.00</td>
    <td>Net-centric Introduction to Computing &amp; Labs</td>
    <td>B</td>
  </tr>
</table>
</body></html>
"""

LOGOUT_PAGE = "<html><body>You have logged out.</body></html>"


def response(text):
    resp = mock.Mock()
    resp.text = text
    resp.status_code = 200
    return resp
