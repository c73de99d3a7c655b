"""
support_header.py
The canonical bridge support header. Generated headers never include this
text whole; support_writer slices the guarded sections a bridge module needs
out of it.
"""

HEADER = r"""#pragma once
#include <array>
#include <cstddef>
#include <cstdint>
#include <exception>
#include <new>
#include <string>
#include <type_traits>
#include <utility>
#if defined(_WIN32)
#include <basetsd.h>
#endif

namespace bridge {
inline namespace bridge1 {

#ifndef BRIDGE1_PANIC
#define BRIDGE1_PANIC
// Raised from support code on contract violations; defined further down.
template <typename Exception>
void panic [[noreturn]] (const char *msg);
#endif // BRIDGE1_PANIC

#ifndef BRIDGE1_RUST_STRING
#define BRIDGE1_RUST_STRING
// Owned UTF-8 string, layout compatible with the Rust String.
class String final {
public:
  String() noexcept;
  String(const String &) noexcept;
  String(String &&) noexcept;
  ~String() noexcept;

  String(const std::string &);
  String(const char *);
  String(const char *, std::size_t);

  String &operator=(const String &) &noexcept;
  String &operator=(String &&) &noexcept;

  explicit operator std::string() const;

  const char *data() const noexcept;
  std::size_t size() const noexcept;
  std::size_t length() const noexcept;
  bool empty() const noexcept;

  void swap(String &) noexcept;

private:
  // Size and alignment statically verified by the generated Rust side.
  std::array<std::uintptr_t, 3> repr;
};
#endif // BRIDGE1_RUST_STRING

#ifndef BRIDGE1_RUST_STR
#define BRIDGE1_RUST_STR
// Borrowed UTF-8 string, layout compatible with the Rust &str.
class Str final {
public:
  Str() noexcept;
  Str(const String &) noexcept;
  Str(const std::string &);
  Str(const char *);
  Str(const char *, std::size_t);

  Str &operator=(const Str &) &noexcept = default;

  explicit operator std::string() const;

  const char *data() const noexcept;
  std::size_t size() const noexcept;
  std::size_t length() const noexcept;
  bool empty() const noexcept;

  Str(const Str &) noexcept = default;
  ~Str() noexcept = default;

private:
  std::array<std::uintptr_t, 2> repr;
};
#endif // BRIDGE1_RUST_STR

#ifndef BRIDGE1_RUST_OPAQUE
#define BRIDGE1_RUST_OPAQUE
// Base of every opaque Rust type; never constructed from C++.
class Opaque {
public:
  Opaque() = delete;
  Opaque(const Opaque &) = delete;
  ~Opaque() = delete;
};
#endif // BRIDGE1_RUST_OPAQUE

#ifndef BRIDGE1_IS_COMPLETE
#define BRIDGE1_IS_COMPLETE
namespace detail {
namespace {
template <typename T, typename = std::size_t>
struct is_complete : std::false_type {};
template <typename T>
struct is_complete<T, decltype(sizeof(T))> : std::true_type {};
} // namespace
} // namespace detail
#endif // BRIDGE1_IS_COMPLETE

#ifndef BRIDGE1_LAYOUT
#define BRIDGE1_LAYOUT
class layout {
  template <typename T>
  friend std::size_t size_of();
  template <typename T>
  friend std::size_t align_of();
  template <typename T>
  static typename std::enable_if<std::is_base_of<Opaque, T>::value,
                                 std::size_t>::type
  do_size_of() {
    return T::layout::size();
  }
  template <typename T>
  static typename std::enable_if<!std::is_base_of<Opaque, T>::value,
                                 std::size_t>::type
  do_size_of() {
    return sizeof(T);
  }
  template <typename T>
  static
      typename std::enable_if<detail::is_complete<T>::value, std::size_t>::type
      size_of() {
    return do_size_of<T>();
  }
  template <typename T>
  static typename std::enable_if<std::is_base_of<Opaque, T>::value,
                                 std::size_t>::type
  do_align_of() {
    return T::layout::align();
  }
  template <typename T>
  static typename std::enable_if<!std::is_base_of<Opaque, T>::value,
                                 std::size_t>::type
  do_align_of() {
    return alignof(T);
  }
  template <typename T>
  static
      typename std::enable_if<detail::is_complete<T>::value, std::size_t>::type
      align_of() {
    return do_align_of<T>();
  }
};

template <typename T>
std::size_t size_of() {
  return layout::size_of<T>();
}

template <typename T>
std::size_t align_of() {
  return layout::align_of<T>();
}
#endif // BRIDGE1_LAYOUT

#ifndef BRIDGE1_RUST_SLICE
#define BRIDGE1_RUST_SLICE
// Borrowed contiguous sequence; &[T] or &mut [T] depending on constness.
template <typename T>
class Slice final {
public:
  using value_type = T;

  Slice() noexcept;
  Slice(T *, std::size_t count) noexcept;

  Slice &operator=(const Slice<T> &) &noexcept = default;
  Slice &operator=(Slice<T> &&) &noexcept = default;

  T *data() const noexcept;
  std::size_t size() const noexcept;
  std::size_t length() const noexcept;
  bool empty() const noexcept;

  T &operator[](std::size_t n) const noexcept;
  T &at(std::size_t n) const;
  T &front() const noexcept;
  T &back() const noexcept;

  Slice(const Slice<T> &) noexcept;
  ~Slice() noexcept = default;

  void swap(Slice &) noexcept;

private:
  std::array<std::uintptr_t, 2> repr;
};
#endif // BRIDGE1_RUST_SLICE

#ifndef BRIDGE1_RUST_BOX
#define BRIDGE1_RUST_BOX
// Owning pointer to a Rust heap allocation.
template <typename T>
class Box final {
public:
  using element_type = T;
  using const_pointer =
      typename std::add_pointer<typename std::add_const<T>::type>::type;
  using pointer = typename std::add_pointer<T>::type;

  Box() = delete;
  Box(Box &&) noexcept;
  ~Box() noexcept;

  explicit Box(const T &);
  explicit Box(T &&);

  Box &operator=(Box &&) &noexcept;

  const T *operator->() const noexcept;
  const T &operator*() const noexcept;
  T *operator->() noexcept;
  T &operator*() noexcept;

  template <typename... Fields>
  static Box in_place(Fields &&...);

  void swap(Box &) noexcept;

  static Box from_raw(T *) noexcept;
  T *into_raw() noexcept;

private:
  class uninit;
  class allocation;
  Box(uninit) noexcept;
  void drop() noexcept;

  T *ptr;
};
#endif // BRIDGE1_RUST_BOX

#ifndef BRIDGE1_RUST_VEC
#define BRIDGE1_RUST_VEC
// Owned growable sequence, layout compatible with the Rust Vec<T>.
template <typename T>
class Vec final {
public:
  using value_type = T;

  Vec() noexcept;
  Vec(std::initializer_list<T>);
  Vec(const Vec &);
  Vec(Vec &&) noexcept;
  ~Vec() noexcept;

  Vec &operator=(Vec &&) &noexcept;
  Vec &operator=(const Vec &) &;

  std::size_t size() const noexcept;
  bool empty() const noexcept;
  const T *data() const noexcept;
  T *data() noexcept;
  std::size_t capacity() const noexcept;

  const T &operator[](std::size_t n) const noexcept;
  const T &at(std::size_t n) const;
  const T &front() const noexcept;
  const T &back() const noexcept;

  T &operator[](std::size_t n) noexcept;
  T &at(std::size_t n);
  T &front() noexcept;
  T &back() noexcept;

  void reserve(std::size_t new_cap);
  void push_back(const T &value);
  void push_back(T &&value);
  template <typename... Args>
  void emplace_back(Args &&...args);
  void truncate(std::size_t len);
  void clear();

  void swap(Vec &) noexcept;

private:
  void reserve_total(std::size_t new_cap) noexcept;
  void set_len(std::size_t len) noexcept;
  void drop() noexcept;

  std::array<std::uintptr_t, 3> repr;
};
#endif // BRIDGE1_RUST_VEC

#ifndef BRIDGE1_RUST_FN
#define BRIDGE1_RUST_FN
template <typename Signature>
class Fn;

template <typename Ret, typename... Args>
class Fn<Ret(Args...)> final {
public:
  Ret operator()(Args... args) const noexcept;
  Fn operator*() const noexcept;

private:
  Ret (*trampoline)(Args..., void *fn) noexcept;
  void *fn;
};
#endif // BRIDGE1_RUST_FN

#ifndef BRIDGE1_RUST_ERROR
#define BRIDGE1_RUST_ERROR
// Carries the Display text of a Rust error across the boundary.
class Error final : public std::exception {
public:
  Error(const Error &);
  Error(Error &&) noexcept;
  ~Error() noexcept override;

  Error &operator=(const Error &) &;
  Error &operator=(Error &&) &noexcept;

  const char *what() const noexcept override;

private:
  Error() noexcept = default;
  const char *msg;
  std::size_t len;
};
#endif // BRIDGE1_RUST_ERROR

#ifndef BRIDGE1_RUST_ISIZE
#define BRIDGE1_RUST_ISIZE
#if defined(_WIN32)
using isize = SSIZE_T;
#else
using isize = ssize_t;
#endif
#endif // BRIDGE1_RUST_ISIZE

#ifndef BRIDGE1_RELOCATABLE
#define BRIDGE1_RELOCATABLE
namespace detail {
template <typename... Ts>
struct make_void {
  using type = void;
};

template <typename... Ts>
using void_t = typename make_void<Ts...>::type;

template <typename Void, template <typename...> class, typename...>
struct detect : std::false_type {};
template <template <typename...> class T, typename... A>
struct detect<void_t<T<A...>>, T, A...> : std::true_type {};

template <template <typename...> class T, typename... A>
using is_detected = detect<void, T, A...>;

template <typename T>
using detect_IsRelocatable = typename T::IsRelocatable;

template <typename T>
struct get_IsRelocatable
    : std::is_same<typename T::IsRelocatable, std::true_type> {};
} // namespace detail

template <typename T>
struct IsRelocatable
    : std::conditional<
          detail::is_detected<detail::detect_IsRelocatable, T>::value,
          detail::get_IsRelocatable<T>,
          std::integral_constant<
              bool, std::is_trivially_move_constructible<T>::value &&
                        std::is_trivially_destructible<T>::value>>::type {};
#endif // BRIDGE1_RELOCATABLE

#ifndef BRIDGE1_PANIC
#define BRIDGE1_PANIC
template <typename Exception>
void panic [[noreturn]] (const char *msg) {
  throw Exception(msg);
}
#endif // BRIDGE1_PANIC

} // inline namespace bridge1
} // namespace bridge
"""
